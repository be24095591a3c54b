"""Entry point: sample fields, queries, and experiment execution."""

from tfidf_similarity.field_state import FieldInvertState
from tfidf_similarity.experiments import ExperimentRunner


# --------------------------------------------------------------------------
# Sample collection: one "body" field per document
# --------------------------------------------------------------------------

# Tokens joined with "/" share a position: the first has a position
# increment of 1, the rest (synonyms) an increment of 0.

DOCUMENTS = [
    {"id": "d01", "text": "fast car/automobile", "boost": 1.0},
    {"id": "d02", "text": "a fast red car/automobile/auto on the road", "boost": 1.0},
    {"id": "d03", "text": "search engines rank documents by relevance", "boost": 1.0},
    {"id": "d04", "text": "term frequency and inverse document frequency", "boost": 1.0},
    {"id": "d05", "text": "ranking", "boost": 1.0},
    {"id": "d06", "text": "vector space model of information retrieval", "boost": 2.0},
    {
        "id": "d07",
        "text": "long fields are penalized so that raw term frequency does not "
                "unfairly favor them over short fields in ranking",
        "boost": 1.0,
    },
    {"id": "d08", "text": "the quick/fast brown fox jumps over the lazy dog", "boost": 1.0},
    {"id": "d09", "text": "phrase queries score proximity with sloppy frequency", "boost": 1.0},
    {"id": "d10", "text": "norms are stored as a single byte per field", "boost": 0.5},
    {"id": "d11", "text": "car", "boost": 1.0},
    {
        "id": "d12",
        "text": "an inverted index maps each term to the documents containing it "
                "along with positions and frequencies for scoring and ranking",
        "boost": 1.0,
    },
]

QUERIES = [
    {"text": "fast car", "terms": ["fast", "car"]},
    {"text": "term frequency", "terms": ["term", "frequency"]},
    {"text": "ranking fields", "terms": ["ranking", "fields"]},
    {"text": "byte norms", "terms": ["byte", "norms"]},
]


def analyze(text):
    """Return (tokens, position_increments) for a sample text."""
    tokens = []
    increments = []
    for word in text.lower().split():
        for i, token in enumerate(word.split("/")):
            tokens.append(token)
            increments.append(1 if i == 0 else 0)
    return tokens, increments


def build_collection():
    """Analyze documents into per-document fields and term frequencies."""
    fields = []
    term_freqs = []
    for doc_def in DOCUMENTS:
        tokens, increments = analyze(doc_def["text"])
        fields.append(FieldInvertState.from_position_increments(
            "body", increments, boost=doc_def["boost"]
        ))
        freqs = {}
        for token in tokens:
            freqs[token] = freqs.get(token, 0) + 1
        term_freqs.append(freqs)
    return fields, term_freqs


def build_queries(term_freqs):
    """Attach document frequencies and per-document frequencies to queries."""
    queries = []
    for query_def in QUERIES:
        terms = query_def["terms"]
        queries.append({
            "text": query_def["text"],
            "doc_freqs": [sum(1 for tf in term_freqs if t in tf) for t in terms],
            "freqs": [[tf.get(t, 0) for t in terms] for tf in term_freqs],
        })
    return queries


def main():
    """Run all experiments and print results."""
    fields, term_freqs = build_collection()
    queries = build_queries(term_freqs)
    runner = ExperimentRunner(fields, queries)
    results = runner.run_all()

    print("=" * 72)
    print("TF-IDF Similarity Experimental Validation")
    print("=" * 72)
    print()
    print("Collection: %d documents, similarity=%s" % (
        len(fields), runner.similarity
    ))
    print("Queries: %d" % len(queries))
    print()

    all_passed = True
    for name, passed, details in results:
        status = "PASS" if passed else "FAIL"
        if not passed:
            all_passed = False
        print("-" * 72)
        print("[%s] %s" % (status, name))
        for line in details.split("\n"):
            print("       %s" % line)
        print()

    print("=" * 72)
    if all_passed:
        print("All %d experiments PASSED." % len(results))
    else:
        failed = [name for name, passed, _ in results if not passed]
        print("FAILED experiments: %s" % ", ".join(failed))
    print("=" * 72)
    return 0 if all_passed else 1


if __name__ == "__main__":
    raise SystemExit(main())
