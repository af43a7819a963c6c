from __future__ import annotations
from importlib import metadata

def get_version()->str:
    try:
        return metadata.version('pcrsim')
    except metadata.PackageNotFoundError:
        return '0.1.0'
