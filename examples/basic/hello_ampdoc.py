"""Parse a document in 3 lines — zero config, zero deps."""

from ampdoc import parse

doc = parse("---\ntitle: Hello\n---\n# Hello **World**")
print(doc.frontmatter)
print(doc.blocks[0])
