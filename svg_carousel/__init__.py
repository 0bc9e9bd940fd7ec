"""SVG carousel viewer.

- `dir_loader`: one-shot, best-effort directory scan
- `carousel`: cyclic cursor over the scanned items and command dispatch
- `main`: Qt window wiring keys/buttons to the carousel
"""
