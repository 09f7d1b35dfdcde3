"""Helpers for building throwaway archives on disk."""

import os

FIXTURE_ARCHIVE = os.path.join(os.path.dirname(__file__), "fixtures", "archive")

NOTE_TEMPLATE = (
    '<?xml version="1.0" encoding="utf-8"?>\n'
    "<note><title>{title}</title><text>{body}</text></note>\n"
)


def write_manifest(root, entries, revision=0):
    """Write ``manifest.xml`` listing ``entries`` as (id, rev) pairs."""
    lines = [f'<sync revision="{revision}">']
    lines += [f'  <note id="{note_id}" rev="{rev}" />' for note_id, rev in entries]
    lines.append("</sync>")
    with open(os.path.join(root, "manifest.xml"), "w", encoding="utf-8") as f:
        f.write("\n".join(lines))


def write_note(root, note_id, rev, title, body):
    """Write ``<root>/0/<rev>/<note_id>.note`` and return its path."""
    directory = os.path.join(root, "0", str(rev))
    os.makedirs(directory, exist_ok=True)
    path = os.path.join(directory, f"{note_id}.note")
    with open(path, "w", encoding="utf-8") as f:
        f.write(NOTE_TEMPLATE.format(title=title, body=body))
    return path
