"""Rewrite one hunk; every other byte of the document stays put."""

from testmark import parse

original = """\
# Expected output

[testmark]:# (stdout)
```text
old output
```

Regenerate with `make fixtures`.
"""

doc = parse(original)
doc.hunks[0].text = "new output\nacross two lines"

updated = doc.render_text()
print(updated)
print("Prose unchanged:", updated.endswith("Regenerate with `make fixtures`.\n"))
