"""List every data hunk in a document, in order."""

from testmark import parse

source = """\
Some prose.

[testmark]:# (greeting)
```text
hello, world
```

```python
print("plain code blocks are not hunks")
```
"""

doc = parse(source)
for hunk in doc:
    print(f"{hunk.name} ({hunk.info or 'no info'}) at {hunk.original_pos}: {hunk.text!r}")
