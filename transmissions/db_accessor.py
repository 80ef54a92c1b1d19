import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Type

from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import Model, QuerySet

from transmissions.exceptions import ConflictError, StoreError

logger = logging.getLogger(__name__)


class DB_Accessor:
    """Generic data accessor wrapping basic queryset operations.

    Store failures never leak as driver exceptions: uniqueness violations
    become ``ConflictError`` and every other database failure ``StoreError``.
    """

    def __init__(self, model: Type[Model]) -> None:
        self.model = model

    @contextmanager
    def store_errors(self) -> Iterator[None]:
        """Translate database exceptions raised inside the block."""
        try:
            yield
        except IntegrityError as exc:
            raise ConflictError(str(exc)) from exc
        except DatabaseError as exc:
            logger.warning("%s store error: %s", self.model.__name__, exc)
            raise StoreError(str(exc)) from exc

    def list(
        self,
        *,
        filters: Optional[Mapping[str, Any]] = None,
        order_by: Sequence[str] = (),
        limit: Optional[int] = None,
        offset: int = 0,
        as_dict: bool = False,
    ) -> List[Model] | List[Dict[str, Any]]:
        """Return a filtered/ordered/sliced list of rows (or dicts)."""
        qs: QuerySet = self.model.objects.filter(**(filters or {}))
        qs = self._apply_ordering(qs, order_by)
        qs = self._apply_slice(qs, offset=offset, limit=limit)
        with self.store_errors():
            return list(qs.values()) if as_dict else list(qs)

    def _apply_ordering(self, qs: QuerySet, order_by: Sequence[str]) -> QuerySet:
        return qs.order_by(*order_by) if order_by else qs

    def _apply_slice(
        self, qs: QuerySet, *, offset: int = 0, limit: Optional[int] = None
    ) -> QuerySet:
        if not (offset or limit is not None):
            return qs
        start = max(0, int(offset))
        end = None if limit is None else start + max(0, int(limit))
        return qs[start:end]

    def fetch(self, qs: QuerySet) -> List[Model]:
        """Evaluate a queryset built by a repository."""
        with self.store_errors():
            return list(qs)

    def first(self, qs: QuerySet) -> Optional[Model]:
        """Return the first row of a queryset, or None."""
        with self.store_errors():
            return qs.first()

    def get(self, **lookup: Any) -> Model:
        """Fetch a single object matching the lookup."""
        with self.store_errors():
            return self.model.objects.get(**lookup)

    def create(self, **data: Any) -> Model:
        """Create and return a new object inside its own savepoint."""
        with self.store_errors():
            with transaction.atomic():
                return self.model.objects.create(**data)

    def update(self, lookup: Mapping[str, Any], **data: Any) -> int:
        """Update objects matching lookup; return count updated."""
        with self.store_errors():
            return self.model.objects.filter(**lookup).update(**data)

    def delete(self, **lookup: Any) -> int:
        """Delete objects matching lookup; return count deleted."""
        with self.store_errors():
            count, _ = self.model.objects.filter(**lookup).delete()
        return count
