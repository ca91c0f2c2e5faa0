"""Cache a parsed tree next to its source, as a JSON round-trip."""

from bbtree import parse
from bbtree.serialization import from_json, to_json

source = "[size=14]Cached[/size] post with [i]markup[/i]."
segments = parse(source)

json_str = to_json(segments)
restored = from_json(json_str, source)

print("Original == restored:", segments == restored)
print("JSON length:", len(json_str), "chars")
