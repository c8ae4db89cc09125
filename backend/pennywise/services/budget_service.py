"""Service for matching budget records to the month and scope being edited."""

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, List, Optional

from pennywise.exceptions import IntegrityAmbiguity, ValidationError
from pennywise.schemas.budget import (
    OVERALL,
    BudgetRecord,
    Resolution,
    ResolutionMode,
    Selection,
)

logger = logging.getLogger(__name__)

# Same bounds as a NUMERIC(15, 2) money column
MAX_AMOUNT = Decimal("9999999999999.99")
AMOUNT_PLACES = 2


def validate_amount(amount: Any) -> Decimal:
    """Coerce a budget amount to Decimal, rejecting negative or non-numeric input."""
    if isinstance(amount, bool):
        raise ValidationError("Budget amount must be a number")
    try:
        value = Decimal(str(amount).strip())
    except (InvalidOperation, ValueError) as e:
        raise ValidationError(f"Budget amount must be a number, got {amount!r}") from e
    if not value.is_finite():
        raise ValidationError(f"Budget amount must be finite, got {amount!r}")
    if value < 0:
        raise ValidationError(f"Budget amount must be zero or more, got {value}")
    if value > MAX_AMOUNT:
        raise ValidationError(f"Budget amount must not exceed {MAX_AMOUNT}, got {value}")
    if value.as_tuple().exponent < -AMOUNT_PLACES:
        raise ValidationError(f"Budget amount allows at most {AMOUNT_PLACES} decimal places, got {value}")
    return value


def parse_scope(raw: Optional[str]) -> Any:
    """Parse a category scope from a query string: a category id or 'overall'."""
    if raw is None or raw.strip().lower() in ("", OVERALL):
        return OVERALL
    try:
        return int(raw)
    except ValueError as e:
        raise ValidationError(f"Category scope must be an id or '{OVERALL}', got {raw!r}") from e


def matches_selection(record: BudgetRecord, selection: Selection) -> bool:
    """Same month, and either both overall or the same category id."""
    if record.month != selection.month:
        return False
    if selection.is_overall:
        return record.is_overall
    return record.category_id == selection.category_id


class BudgetResolver:
    """
    Holds the budget records known to the client and the selection being edited.

    `store` is the remote budget collaborator and must provide
    `create_budget(month, amount, category_id)`,
    `update_budget(budget_id, month, amount, category_id)` and
    `delete_budget(budget_id)`. The local cache is only touched after the
    store call returns.
    """

    def __init__(
        self,
        store: Any,
        records: Optional[Iterable[BudgetRecord]] = None,
        selection: Optional[Selection] = None
    ):
        self.store = store
        self.records: List[BudgetRecord] = list(records or [])
        self.selection: Optional[Selection] = None
        self.resolution: Optional[Resolution] = None
        if selection is not None:
            self.select(selection)

    def resolve(self, selection: Selection) -> Resolution:
        """Find the single record governing `selection`, if any."""
        matches = [r for r in self.records if matches_selection(r, selection)]

        if len(matches) > 1:
            ids = [r.id for r in matches]
            raise IntegrityAmbiguity(
                f"{len(matches)} budgets match {selection.month} / {selection.category_scope}: {ids}",
                record_ids=ids
            )

        if not matches:
            return Resolution(mode=ResolutionMode.create)

        record = matches[0]
        return Resolution(
            mode=ResolutionMode.update,
            prefill_amount=record.amount,
            record_id=record.id
        )

    def select(self, selection: Selection) -> Resolution:
        """Point the form at a new selection and republish its resolution."""
        resolution = self.resolve(selection)
        self.selection = selection
        self.resolution = resolution
        return resolution

    def edit(self, record: BudgetRecord) -> Resolution:
        """Select the scope governed by an existing record."""
        return self.select(Selection.for_record(record))

    def records_in_scope(self, month: Optional[str] = None) -> List[BudgetRecord]:
        """Records for a month regardless of category. Defaults to the selected month."""
        if month is None:
            if self.selection is None:
                return []
            month = self.selection.month
        return [r for r in self.records if r.month == month]

    def find(self, record_id: int) -> Optional[BudgetRecord]:
        return next((r for r in self.records if r.id == record_id), None)

    def duplicates_of(self, record_id: int) -> List[int]:
        """Ids of every record sharing this record's scope, when there is more than one."""
        record = self.find(record_id)
        if record is None:
            return []
        selection = Selection.for_record(record)
        ids = [r.id for r in self.records if matches_selection(r, selection)]
        return ids if len(ids) > 1 else []

    def save(self, selection: Selection, amount: Any) -> BudgetRecord:
        """
        Create or update the budget governing `selection`.

        Raises ValidationError before any store call when the amount is invalid.
        """
        value = validate_amount(amount)
        resolution = self.select(selection)

        if resolution.mode == ResolutionMode.update:
            saved = self.store.update_budget(
                resolution.record_id,
                selection.month,
                value,
                selection.category_id
            )
            self.records = [saved if r.id == resolution.record_id else r for r in self.records]
            logger.info(f"Updated budget {saved.id} for {selection.month} / {selection.category_scope}")
        else:
            saved = self.store.create_budget(selection.month, value, selection.category_id)
            self.records.append(saved)
            logger.info(f"Created budget {saved.id} for {selection.month} / {selection.category_scope}")

        self.resolution = self.resolve(selection)
        return saved

    def delete(self, record_id: int) -> Optional[Resolution]:
        """
        Delete the record the current selection resolves to, or one of several
        records sharing a scope.

        Returns the resolution of the deleted record's scope afterwards: create
        mode normally, update mode when one duplicate remains, and None while
        the scope is still ambiguous.
        """
        editing = (
            self.resolution is not None
            and self.resolution.mode == ResolutionMode.update
            and self.resolution.record_id == record_id
        )
        duplicates = self.duplicates_of(record_id)
        if not editing and not duplicates:
            raise ValidationError(f"Budget {record_id} is not the budget being edited")

        selection = Selection.for_record(self.find(record_id))
        self.store.delete_budget(record_id)
        self.records = [r for r in self.records if r.id != record_id]
        logger.info(f"Deleted budget {record_id}")

        self.selection = selection
        if len(duplicates) > 2:
            logger.warning(f"Budgets {[i for i in duplicates if i != record_id]} still share one scope")
            self.resolution = None
        else:
            self.resolution = self.resolve(selection)
        return self.resolution
