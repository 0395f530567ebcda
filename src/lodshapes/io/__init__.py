from .json_output import canonical_json, colored_json, dumps, plain_json, similarity_report

__all__ = [
    "canonical_json",
    "colored_json",
    "dumps",
    "plain_json",
    "similarity_report",
]
