"""
CRUD operations for the progress store.
"""

from lessonlab.boundary.db.CRUD.attempt_crud import AttemptCRUD, attempt_crud
from lessonlab.boundary.db.CRUD.base_crud import BaseCRUD
from lessonlab.boundary.db.CRUD.progress_crud import ProgressCRUD, progress_crud

__all__ = [
    "BaseCRUD",
    "AttemptCRUD",
    "ProgressCRUD",
    "attempt_crud",
    "progress_crud",
]
