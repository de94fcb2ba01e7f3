from typing import TypedDict


class VFSStatResult(TypedDict):
    size: int
    created_at: float
    accessed_at: float
    modified_at: float
    attributes: int
    is_dir: bool
