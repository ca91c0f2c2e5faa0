"""Parse and render BBCode in 3 lines."""

from bbtree import parse, render

segments = parse("[b]Hello[/b] [color=orange]World[/color]")
html = render(segments)
print(html)
