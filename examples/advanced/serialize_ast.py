"""Cache a parsed document to disk — JSON round-trip."""

from ampdoc import parse
from ampdoc.serialization import from_json, to_json

doc = parse("# Cached document\n\nThis *document* can be serialized and restored.")

json_str = to_json(doc, indent=2)
restored = from_json(json_str)

print(json_str)
print("Parsed == restored:", doc == restored)
