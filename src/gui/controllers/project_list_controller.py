"""Controller for the sketch list: loading, filtering, selection, create and delete."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from config.sketch_defaults import DEFAULT_SKETCH_SOURCE
from gui.controllers.project_list_state import ProjectListState
from gui.controllers.types import (
    DisplayRow,
    SketchListPresenter,
    SketchStoreProtocol,
    TaskRunner,
)
from services.errors import NameValidationError, SelectionOutOfRange
from services.name_validation import validate_sketch_name
from services.sketch_service import SketchRecord
from utils.error_handling import log_exception
from utils.formatting import format_count, format_created

logger = logging.getLogger(__name__)

RefreshCallback = Callable[[bool], None]


class CreateFlowState(str, Enum):
    CLOSED = "closed"
    PROMPTING = "prompting"
    VALIDATING = "validating"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    PERSISTING = "persisting"
    REFRESHING = "refreshing"


@dataclass(frozen=True)
class CreateOutcome:
    state: CreateFlowState
    message: str = ""
    suggested_name: str = ""

    @property
    def accepted(self) -> bool:
        return self.state is CreateFlowState.ACCEPTED


class ProjectListController:
    """Owns the sketch list state and orchestrates persistence and presentation.

    All methods run on the UI thread. Storage calls go through ``runner``,
    whose callbacks are delivered back on the UI thread. Only the most
    recently issued refresh may replace the list; older completions are
    dropped.
    """

    def __init__(
        self,
        store: SketchStoreProtocol,
        presenter: SketchListPresenter,
        runner: Optional[TaskRunner] = None,
        default_source: Optional[str] = None,
        show_creation_dates: bool = True,
    ) -> None:
        if runner is None:
            from gui.workers import QtTaskRunner

            runner = QtTaskRunner()
        self.store = store
        self.presenter = presenter
        self.runner = runner
        self.default_source = default_source or DEFAULT_SKETCH_SOURCE
        self.show_creation_dates = show_creation_dates

        self.state = ProjectListState()
        self.create_state = CreateFlowState.CLOSED
        self._latest_refresh_id = 0
        self._mutation_in_flight = False

    # ---- Lifecycle -------------------------------------------------------

    def activate(self) -> int:
        """Show an empty list and start the first load."""
        self._render()
        self.presenter.set_count(format_count(None))
        return self.refresh()

    def teardown(self) -> None:
        """Discard cached state; completions still in flight are ignored."""
        self._latest_refresh_id += 1
        self.state = ProjectListState()
        self.create_state = CreateFlowState.CLOSED
        self._mutation_in_flight = False

    # ---- Load ------------------------------------------------------------

    def refresh(self, after: Optional[RefreshCallback] = None) -> int:
        """Request the full list; returns the id of this request."""
        self._latest_refresh_id += 1
        request_id = self._latest_refresh_id
        logger.debug("Refreshing sketches", extra={"event": "refresh.start", "request_id": request_id})

        self.runner.submit(
            self.store.list_projects,
            on_success=lambda projects: self._on_refresh_finished(request_id, projects, after),
            on_error=lambda exc: self._on_refresh_failed(request_id, exc, after),
        )
        return request_id

    def _on_refresh_finished(
        self,
        request_id: int,
        projects: List[SketchRecord],
        after: Optional[RefreshCallback],
    ) -> None:
        if request_id != self._latest_refresh_id:
            logger.debug(
                "Dropping stale refresh",
                extra={"event": "refresh.stale", "request_id": request_id, "latest": self._latest_refresh_id},
            )
            if after:
                after(False)
            return

        self.state = self.state.with_projects(projects)
        self._render()
        self.presenter.set_count(format_count(len(self.state.all_projects)))
        logger.info(
            "Loaded %d sketches",
            len(self.state.all_projects),
            extra={"event": "refresh.done", "request_id": request_id},
        )
        if after:
            after(True)

    def _on_refresh_failed(self, request_id: int, error: Exception, after: Optional[RefreshCallback]) -> None:
        # Keep showing the last good list
        log_exception(error, "Refreshing sketches failed", {"request_id": request_id}, level=logging.WARNING)
        if after:
            after(False)

    # ---- Filter ----------------------------------------------------------

    def set_filter_text(self, text: Optional[str], search_active: bool = True) -> None:
        self.state = self.state.with_filter(text or "", search_active)
        self._render()

    def visible_projects(self) -> List[SketchRecord]:
        return list(self.state.visible_projects)

    # ---- Select ----------------------------------------------------------

    def preview_visible(self, index: int) -> SketchRecord:
        """Resolve a displayed row without navigating to it."""
        visible = self.state.visible_projects
        if not 0 <= index < len(visible):
            raise SelectionOutOfRange(index, len(visible))
        return visible[index]

    def select_visible(self, index: int) -> SketchRecord:
        project = self.preview_visible(index)
        self.presenter.open_editor(project)
        return project

    # ---- Delete ----------------------------------------------------------

    def can_delete(self) -> bool:
        return not self.state.is_filter_active

    def request_delete(self, index: int) -> bool:
        """Confirm and delete the displayed row; returns True once the delete is issued."""
        if not self.can_delete():
            logger.info("Delete refused while filtering", extra={"event": "delete.refused"})
            return False
        if self._mutation_in_flight:
            logger.warning("Delete ignored, another change is still in progress")
            return False

        name = self.preview_visible(index).name
        if not self.presenter.confirm_delete(name):
            return False

        self._mutation_in_flight = True
        self.runner.submit(
            lambda: self.store.delete_project(name),
            on_success=lambda _: self.refresh(after=self._end_mutation),
            on_error=lambda exc: self._on_mutation_failed("Deleting sketch failed", name, exc),
        )
        return True

    # ---- Create ----------------------------------------------------------

    def start_create(self) -> Optional[str]:
        """Prompt until a valid name is submitted or the user cancels."""
        initial_name, message = "", ""
        while True:
            self.create_state = CreateFlowState.PROMPTING
            submitted = self.presenter.prompt_create(initial_name, message)
            if submitted is None:
                self.cancel_create()
                return None

            outcome = self.request_create(submitted)
            if outcome.accepted:
                return submitted
            if outcome.state is not CreateFlowState.REJECTED:
                return None
            initial_name, message = outcome.suggested_name, outcome.message

    def cancel_create(self) -> None:
        if self.create_state in (CreateFlowState.PROMPTING, CreateFlowState.REJECTED):
            self.create_state = CreateFlowState.CLOSED

    def request_create(self, proposed_name: str) -> CreateOutcome:
        self.create_state = CreateFlowState.VALIDATING
        try:
            name = validate_sketch_name(proposed_name, self.state.names())
        except NameValidationError as exc:
            self.create_state = CreateFlowState.REJECTED
            logger.debug("Rejected sketch name %r: %s", proposed_name, exc.message)
            return CreateOutcome(CreateFlowState.REJECTED, exc.message, exc.suggested_name)

        if self._mutation_in_flight:
            logger.warning("Create ignored, another change is still in progress")
            self.create_state = CreateFlowState.CLOSED
            return CreateOutcome(CreateFlowState.CLOSED)

        self._mutation_in_flight = True
        self.create_state = CreateFlowState.PERSISTING
        self.runner.submit(
            lambda: self.store.create_project(name, self.default_source),
            on_success=lambda _: self._on_create_persisted(name),
            on_error=lambda exc: self._on_mutation_failed("Creating sketch failed", name, exc),
        )
        return CreateOutcome(CreateFlowState.ACCEPTED, suggested_name=name)

    def _on_create_persisted(self, name: str) -> None:
        self.create_state = CreateFlowState.REFRESHING
        self.refresh(after=lambda succeeded: self._finish_create(name, succeeded))

    def _finish_create(self, name: str, succeeded: bool) -> None:
        self.create_state = CreateFlowState.CLOSED
        self._end_mutation(succeeded)
        if not succeeded:
            return
        for index, project in enumerate(self.state.visible_projects):
            if project.name == name:
                self.presenter.select_row(index)
                return
        logger.info("New sketch %r not in refreshed list", name)

    # ---- Helpers ---------------------------------------------------------

    def _end_mutation(self, _succeeded: bool = True) -> None:
        self._mutation_in_flight = False

    def _on_mutation_failed(self, context: str, name: str, error: Exception) -> None:
        log_exception(error, context, {"sketch": name}, level=logging.WARNING)
        self._mutation_in_flight = False
        self.create_state = CreateFlowState.CLOSED

    def display_rows(self) -> List[DisplayRow]:
        filtering = self.state.is_filter_active
        rows = []
        for project in self.state.visible_projects:
            created = None
            if not filtering and self.show_creation_dates:
                created = format_created(project.creation_date)
            rows.append(DisplayRow(name=project.name, created_at_display=created))
        return rows

    def _render(self) -> None:
        self.presenter.render_rows(self.display_rows())
