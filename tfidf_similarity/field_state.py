"""Per-field token statistics consumed by length normalization."""


class FieldInvertState:
    """Statistics for one field of one document, as collected at index time.

    Attributes:
        field: Field name.
        length: Total number of tokens in the field.
        num_overlap: Tokens with a position increment of zero (e.g. synonyms).
        boost: Index-time boost multiplier for the field.
    """

    def __init__(self, field, length=0, num_overlap=0, boost=1.0):
        self.field = field
        self.length = length
        self.num_overlap = num_overlap
        self.boost = boost

    @classmethod
    def from_position_increments(cls, field, position_increments, boost=1.0):
        """Count tokens and overlap tokens from a token stream's increments."""
        length = 0
        num_overlap = 0
        for increment in position_increments:
            length += 1
            if increment == 0:
                num_overlap += 1
        return cls(field, length=length, num_overlap=num_overlap, boost=boost)

    def __repr__(self):
        return "FieldInvertState(field=%r, length=%d, num_overlap=%d, boost=%r)" % (
            self.field, self.length, self.num_overlap, self.boost
        )
