from __future__ import annotations

from pathlib import Path

from textual import on
from textual.app import App, ComposeResult
from textual.containers import Container, VerticalScroll
from textual.widgets import (
    Button,
    Footer,
    Header,
    Input,
    Label,
    ListItem,
    ListView,
    Markdown,
    ProgressBar,
    Static,
)
from textual.worker import Worker, WorkerState

from zcv.models import InvalidRecordError, View, ZcvError
from zcv.services.chat_wizard import ChatWizard
from zcv.services.dashboard import build_dashboard
from zcv.services.editors import PersonalInfoEditor, RecordEditor
from zcv.services.jd_tailoring import tailor_resume
from zcv.services.portfolio_io import export_portfolio, import_portfolio
from zcv.services.resume_generator import (
    ContentSelection,
    GeneratorStep,
    ResumeRequest,
    can_proceed,
    generate_resume,
    next_step,
)
from zcv.services.resume_manager import (
    delete_resume,
    download_resume,
    duplicate_resume,
    filter_resumes,
    select_resume,
)
from zcv.state import Action, ActionType, ZcvStore
from zcv.templates import list_templates, recommend_templates
from zcv.tui_rendering import (
    render_chat,
    render_dashboard,
    render_portfolio,
    render_resume_generator,
    render_resume_manager,
)

_PLACEHOLDERS = {
    View.DASHBOARD: "Type a view name (chat, portfolio-builder, ...) to jump there",
    View.PORTFOLIO_BUILDER: "set <field> <value> | skill <name> | import <path>",
    View.CHAT: "Tell me about your experience...",
    View.RESUME_GENERATOR: "role <name> | template <id> | all | generate | tailor <text>",
    View.RESUME_MANAGER: "Search resumes by name, role or company",
}

_NAV_BUTTONS = {
    "nav-dashboard": View.DASHBOARD,
    "nav-portfolio": View.PORTFOLIO_BUILDER,
    "nav-chat": View.CHAT,
    "nav-generator": View.RESUME_GENERATOR,
    "nav-resumes": View.RESUME_MANAGER,
}


class ZcvTUI(App[None]):
    """Terminal front end for the ZCV portfolio builder."""

    TITLE = "ZCV"
    BINDINGS = [
        ("q", "quit", "Quit"),
        ("d", "show('dashboard')", "Dashboard"),
        ("c", "show('chat')", "Chat"),
        ("ctrl+e", "export", "Export portfolio"),
    ]

    CSS = """
Screen {
    layout: vertical;
    background: $background;
}

#middle {
    height: 1fr;
    layout: horizontal;
}

#sidebar {
    width: 26;
    padding: 1 2;
    border: heavy $primary;
    background: $panel;
}

#sidebar Button {
    margin-top: 1;
    width: 100%;
}

#title {
    text-align: center;
    margin-bottom: 1;
    color: $text;
}

#main {
    border: heavy $primary;
    background: $surface;
    height: 1fr;
    padding: 1;
    layout: horizontal;
}

#resume-column {
    width: 36;
}

#output {
    color: $text;
    padding: 1;
}

#statusbar {
    height: auto;
    padding: 0 1;
    border: heavy $primary;
    background: $panel;
}

ProgressBar {
    dock: bottom;
}
"""

    def __init__(self, store: ZcvStore | None = None) -> None:
        super().__init__()
        self._store = store or ZcvStore()
        self._wizard = ChatWizard(self._store)
        self._worker: Worker | None = None
        self._step = GeneratorStep.ROLE
        self._role: str | None = None
        self._template: str | None = None
        self._selection = ContentSelection()
        self._search = ""

    def compose(self) -> ComposeResult:
        yield Header()
        yield Container(
            Container(
                Static("ZCV\nPortfolio Builder", id="title"),
                Button("Dashboard", id="nav-dashboard", variant="primary"),
                Button("Portfolio", id="nav-portfolio"),
                Button("AI Discovery", id="nav-chat"),
                Button("Generate Resume", id="nav-generator"),
                Button("My Resumes", id="nav-resumes"),
                Button("Export JSON", id="btn-export"),
                Button("Exit", id="btn-exit", variant="error"),
                id="sidebar",
            ),
            Container(
                Container(
                    ListView(id="resume-list"),
                    Button("Download .tex", id="btn-download", variant="success"),
                    Button("Duplicate", id="btn-duplicate"),
                    Button("Delete", id="btn-delete", variant="error"),
                    id="resume-column",
                ),
                VerticalScroll(Markdown("", id="output"), id="output-container"),
                id="main",
            ),
            id="middle",
        )
        yield Container(
            Input(id="command"),
            Label("Ready.", id="status"),
            ProgressBar(total=100, show_eta=False, id="progress"),
            id="statusbar",
        )
        yield Footer()

    def on_mount(self) -> None:
        if self._store.hydrate():
            self._set_status("Restored your saved portfolio.")
        self._refresh()

    # ---------------------------------------------------------------------
    # RENDERING
    # ---------------------------------------------------------------------

    def _set_status(self, message: str) -> None:
        self.query_one("#status", Label).update(message)

    def _refresh(self) -> None:
        state = self._store.state
        view = state.current_view
        output = self.query_one("#output", Markdown)
        self.query_one("#command", Input).placeholder = _PLACEHOLDERS[view]
        self.query_one("#resume-column", Container).display = view is View.RESUME_MANAGER

        if view is View.DASHBOARD:
            output.update(render_dashboard(build_dashboard(state.portfolio, state.resumes)))
        elif view is View.PORTFOLIO_BUILDER:
            output.update(render_portfolio(state.portfolio))
        elif view is View.CHAT:
            self._wizard.start()
            output.update(
                render_chat(
                    self._wizard.messages, self._wizard.phase_message(), self._wizard.progress()
                )
            )
        elif view is View.RESUME_GENERATOR:
            templates = recommend_templates(self._role) if self._role else []
            output.update(
                render_resume_generator(
                    self._step,
                    state.portfolio,
                    self._role,
                    self._template,
                    self._selection,
                    templates or list_templates(),
                )
            )
        else:
            self._refresh_resumes()

    def _refresh_resumes(self) -> None:
        state = self._store.state
        resumes = filter_resumes(state.resumes, self._search)
        resume_list = self.query_one("#resume-list", ListView)
        resume_list.clear()
        for resume in resumes:
            resume_list.append(ListItem(Label(resume.name), name=resume.id))

        selected = next((r for r in state.resumes if r.id == state.selected_resume_id), None)
        self.query_one("#output", Markdown).update(render_resume_manager(resumes, selected))

    def _show(self, view: View) -> None:
        self._store.dispatch(Action(ActionType.SET_VIEW, view))
        self._refresh()

    # ---------------------------------------------------------------------
    # EVENTS
    # ---------------------------------------------------------------------

    @on(Button.Pressed, "#sidebar Button")
    def handle_nav(self, event: Button.Pressed) -> None:
        view = _NAV_BUTTONS.get(event.button.id or "")
        if view is not None:
            self._show(view)

    def action_show(self, view: str) -> None:
        self._show(View(view))

    def action_export(self) -> None:
        self.handle_export()

    @on(Button.Pressed, "#btn-export")
    def handle_export(self) -> None:
        try:
            path = export_portfolio(self._store.state.portfolio, store=self._store)
        except ZcvError as exc:
            self._set_status(f"Export failed: {exc}")
            return
        self._set_status(f"Exported portfolio to {path}")

    @on(Button.Pressed, "#btn-exit")
    def exit_app(self) -> None:
        self.exit()

    @on(ListView.Selected, "#resume-list")
    def handle_resume_selected(self, event: ListView.Selected) -> None:
        select_resume(self._store, event.item.name)
        self._refresh_resumes()

    @on(Button.Pressed, "#btn-download")
    def handle_download(self) -> None:
        resume_id = self._store.state.selected_resume_id
        if resume_id is None:
            self._set_status("Select a resume first.")
            return
        try:
            path = download_resume(self._store, resume_id)
        except ZcvError as exc:
            self._set_status(str(exc))
            return
        self._set_status(f"Saved {path}")
        self._refresh_resumes()

    @on(Button.Pressed, "#btn-duplicate")
    def handle_duplicate(self) -> None:
        resume_id = self._store.state.selected_resume_id
        if resume_id is None:
            self._set_status("Select a resume first.")
            return
        copy = duplicate_resume(self._store, resume_id)
        self._set_status(f"Created {copy.name}")
        self._refresh_resumes()

    @on(Button.Pressed, "#btn-delete")
    def handle_delete(self) -> None:
        resume_id = self._store.state.selected_resume_id
        if resume_id is None:
            self._set_status("Select a resume first.")
            return
        delete_resume(self._store, resume_id)
        self._set_status("Resume deleted.")
        self._refresh_resumes()

    @on(Input.Submitted, "#command")
    def handle_command(self, event: Input.Submitted) -> None:
        text = event.value.strip()
        event.input.value = ""
        if not text:
            return

        view = self._store.state.current_view
        try:
            if view is View.CHAT:
                self._run_chat(text)
            elif view is View.PORTFOLIO_BUILDER:
                self._portfolio_command(text)
            elif view is View.RESUME_GENERATOR:
                self._generator_command(text)
            elif view is View.RESUME_MANAGER:
                self._search = text
                self._refresh_resumes()
            else:
                self._show(View(text))
        except ValueError:
            self._set_status(f"Unknown command: {text}")
        except ZcvError as exc:
            self._set_status(str(exc))

    def _portfolio_command(self, text: str) -> None:
        command, _, rest = text.partition(" ")
        if command == "set":
            field, _, value = rest.partition(" ")
            PersonalInfoEditor(self._store).update_personal_info(field, value)
            self._set_status(f"Updated {field}.")
        elif command == "skill":
            editor = RecordEditor(self._store, "skills")
            form = editor.empty_form()
            form["name"] = rest
            editor.save(form)
            self._set_status(f"Added skill {rest}.")
        elif command == "import":
            import_portfolio(self._store, Path(rest).expanduser())
            self._set_status(f"Imported {rest}.")
        else:
            raise ValueError(command)
        self._refresh()

    def _generator_command(self, text: str) -> None:
        command, _, rest = text.partition(" ")
        if command == "role":
            self._role = rest
        elif command == "template":
            self._template = rest
        elif command == "all":
            self._selection.select_all(self._store.state.portfolio)
        elif command == "generate":
            self._run_generate()
            return
        elif command == "tailor":
            self._run_tailor(rest)
            return
        else:
            raise ValueError(command)

        while self._step is not GeneratorStep.GENERATE and can_proceed(
            self._step, role=self._role, template=self._template, selection=self._selection
        ):
            self._step = next_step(self._step)
        self._refresh()

    # ---------------------------------------------------------------------
    # WORKERS
    # ---------------------------------------------------------------------

    def _start(self, work, name: str, message: str) -> None:
        self.query_one("#progress", ProgressBar).update(progress=10)
        self._set_status(message)
        self._worker = self.run_worker(
            work, name=name, exclusive=True, thread=True, exit_on_error=False
        )

    def _run_chat(self, text: str) -> None:
        self._start(lambda: self._wizard.send_message(text), "chat", "ZCV is typing...")

    def _run_generate(self) -> None:
        if not (self._role and self._template and self._selection.has_content):
            raise InvalidRecordError(
                "Choose a role, a template and at least one experience or project"
            )
        request = ResumeRequest(self._role, self._template, self._selection)
        self._start(
            lambda: generate_resume(self._store, request), "generate", "Generating resume..."
        )

    def _run_tailor(self, job_description: str) -> None:
        if not job_description.strip():
            raise InvalidRecordError("Paste a job description after 'tailor'")
        template = self._template or "tech"
        self._start(
            lambda: tailor_resume(self._store, job_description, template=template),
            "tailor",
            "Analyzing job description...",
        )

    @on(Worker.StateChanged)
    def worker_state(self, event: Worker.StateChanged) -> None:
        if event.worker is not self._worker:
            return
        progress = self.query_one("#progress", ProgressBar)

        if event.state == WorkerState.RUNNING:
            progress.update(progress=40)
            return

        if event.state == WorkerState.SUCCESS:
            progress.update(progress=100)
            if event.worker.name == "chat":
                self._set_status("Ready.")
            else:
                self._step = GeneratorStep.ROLE
                self._selection = ContentSelection()
                self._set_status("Resume ready. Open My Resumes to download it.")
            self._refresh()
            return

        if event.state == WorkerState.ERROR:
            progress.update(progress=0)
            self._set_status(f"Error: {event.worker.error}")
            self._refresh()


def main() -> None:
    ZcvTUI().run()
