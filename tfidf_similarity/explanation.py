"""Score explanations: a value, what produced it, and its sub-values."""


class Explanation:
    """Describes how a score component was computed."""

    def __init__(self, value, description, details=()):
        self.value = value
        self.description = description
        self.details = list(details)

    def add_detail(self, detail):
        self.details.append(detail)

    def is_match(self):
        """An explanation matches when its value is positive."""
        return self.value > 0.0

    def to_string(self, depth=0):
        lines = ["  " * depth + "%s = %s" % (self.value, self.description)]
        for detail in self.details:
            lines.append(detail.to_string(depth + 1))
        return "\n".join(lines)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return "Explanation(value=%r, description=%r)" % (
            self.value, self.description
        )
