"""
Dot-path editing of nested JSON-style documents.

Paths like "yuzu_title_senren.sounds" address nested dict keys.
Missing intermediate dicts are created on the way down.
"""


def _walk(doc, path, create=True):
    """Return (parent_dict, last_key) for a dot path, creating dicts as needed."""
    parts = path.split('.')
    if not all(parts):
        raise ValueError(f"Invalid path: {path!r}")
    node = doc
    for part in parts[:-1]:
        child = node.get(part)
        if child is None:
            if not create:
                return None, parts[-1]
            child = {}
            node[part] = child
        elif not isinstance(child, dict):
            raise TypeError(f"'{part}' in {path!r} is not an object")
        node = child
    return node, parts[-1]


def get_path(doc, path, default=None):
    """Get a value by dot path (e.g., 'yuzu_title_senren.replace')"""
    parent, key = _walk(doc, path, create=False)
    if parent is None:
        return default
    return parent.get(key, default)


def set_path(doc, path, value):
    """Set value at dot path, overwriting whatever is there"""
    parent, key = _walk(doc, path)
    parent[key] = value
    return doc


def append_path(doc, path, value):
    """Append value to the list at dot path; an absent list is created"""
    parent, key = _walk(doc, path)
    items = parent.get(key)
    if items is None:
        items = []
        parent[key] = items
    elif not isinstance(items, list):
        raise TypeError(f"{path!r} is not an array")
    items.append(value)
    return doc
