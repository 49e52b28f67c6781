"""Register custom block types ahead of the built-in rules."""

from ampdoc import Amp, CustomBlock

amp = Amp().extend(
    [
        (r"~~(.+?)~~", lambda s: CustomBlock("strikeThrough", {"body": s[2:-2]})),
        (r"==(.+?)==", lambda s: CustomBlock("highlight", {"body": s[2:-2]})),
    ]
)

doc = amp.parse("# Release notes\n\n~~Old behaviour~~\n\n==New behaviour==")
for block in doc.blocks:
    print(type(block).__name__, getattr(block, "custom_type", ""))
