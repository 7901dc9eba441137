"""
TUI for stepping through an algorithm run.

The explorer is a presentation layer: it pulls steps from a StepSequence
through a StepCursor at the user's pace and never calls back into an engine.

Usage:
    uv run python main.py --algorithm kruskal --explore
"""

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.widgets import DataTable, Footer, Header, Static

from steps import StepSequence
from utils.display import step_detail


class StepExplorerApp(App):
    """Step list on the left, the highlighted step's details on the right."""

    TITLE = "Step Explorer"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("n", "next_step", "Next"),
        Binding("p", "previous_step", "Previous"),
        Binding("home", "first_step", "First"),
        Binding("end", "last_step", "Last"),
        Binding("d", "toggle_dark", "Toggle Dark Mode"),
    ]

    CSS = """
    Screen {
        background: $surface;
    }

    #step-table {
        width: 3fr;
        height: 100%;
    }

    #detail-pane {
        width: 2fr;
        height: 100%;
        padding: 1 2;
        border-left: solid $primary;
    }

    DataTable > .datatable--header {
        text-style: bold;
        background: $primary;
    }
    """

    def __init__(self, sequence: StepSequence, title: str = "Steps", **kwargs) -> None:
        super().__init__(**kwargs)
        self.sequence = sequence
        self.cursor = sequence.cursor()
        self.sub_title = title

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            yield DataTable(id="step-table")
            with VerticalScroll(id="detail-pane"):
                yield Static(id="detail")
        yield Footer()

    def on_mount(self) -> None:
        """Populate the step table and show the first step."""
        table = self.query_one(DataTable)
        table.cursor_type = "row"
        table.add_columns("#", "Action", "Description")
        for step in self.sequence:
            table.add_row(str(step.index), step.action.value, step.description)
        self._show(0)

    def _show(self, index: int) -> None:
        step = self.cursor.seek(index)
        self.query_one("#detail", Static).update(step_detail(step))
        table = self.query_one(DataTable)
        if table.cursor_row != index:
            table.move_cursor(row=index)

    def on_data_table_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        self._show(event.cursor_row)

    def action_next_step(self) -> None:
        if not self.cursor.done:
            self._show(self.cursor.position + 1)

    def action_previous_step(self) -> None:
        if self.cursor.position > 0:
            self._show(self.cursor.position - 1)

    def action_first_step(self) -> None:
        self._show(0)

    def action_last_step(self) -> None:
        self._show(len(self.sequence) - 1)

    def action_toggle_dark(self) -> None:
        """Toggle dark mode."""
        self.theme = "textual-light" if self.theme == "textual-dark" else "textual-dark"


def run_explorer(sequence: StepSequence, title: str = "Steps") -> None:
    """Run the step explorer until the user quits."""
    app = StepExplorerApp(sequence, title)
    app.run()
