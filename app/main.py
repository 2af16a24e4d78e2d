import tkinter as tk
from tkinter import ttk

from api.config import CATALOG_FILE, LOG_LEVEL
from api.services.quiz_service import load_catalog
from core.logging_setup import setup_console_logging
from engine import QuizSession
from models import MultiChoice, SessionState, SingleChoice, TextEntry, TrueFalse


class QuizApp(tk.Tk):
    def __init__(self, session: QuizSession):
        super().__init__()
        self.title("Quiz")
        self.geometry("480x640")
        self.minsize(360, 480)
        self._apply_style()

        self.session = session
        self._unsubscribe = self.session.subscribe(self._on_state_changed)
        # tk variables for the question currently on screen
        self.choice_var = tk.IntVar(value=-1)
        self.check_vars: list[tk.BooleanVar] = []
        self.text_var = tk.StringVar()
        self._rendered_index: int | None = None

        self._build_ui()
        self.protocol("WM_DELETE_WINDOW", self._close)
        self._render()

    def _build_ui(self) -> None:
        self.container = ttk.Frame(self)
        self.container.pack(fill=tk.BOTH, expand=True)

        self.question_frame = ttk.Frame(self.container, padding=16)
        self.final_frame = ttk.Frame(self.container, padding=16)
        for frame in (self.question_frame, self.final_frame):
            frame.grid(row=0, column=0, sticky="nsew")
        self.container.rowconfigure(0, weight=1)
        self.container.columnconfigure(0, weight=1)

        self._build_question_ui()
        self._build_final_ui()

    def _build_question_ui(self) -> None:
        self.progress_label = ttk.Label(self.question_frame, text="")
        self.progress_label.pack(anchor=tk.W)
        self.question_label = ttk.Label(
            self.question_frame,
            text="",
            font=("Segoe UI", 14, "bold"),
            wraplength=420,
        )
        self.question_label.pack(anchor=tk.W, pady=(8, 16))

        self.input_frame = ttk.Frame(self.question_frame)
        self.input_frame.pack(fill=tk.X)

        self.next_button = ttk.Button(
            self.question_frame, text="Next", command=self._next_question
        )
        self.next_button.pack(anchor=tk.E, pady=24)

    def _build_final_ui(self) -> None:
        ttk.Label(
            self.final_frame,
            text="Thank you for completing the quiz!",
            font=("Segoe UI", 16, "bold"),
        ).pack(expand=True, pady=(0, 24))
        ttk.Button(self.final_frame, text="Retry", command=self.session.reset).pack()

    def _apply_style(self) -> None:
        style = ttk.Style(self)
        style.theme_use("clam")
        style.configure("TFrame", background="#f5f5f5")
        style.configure("TLabel", background="#f5f5f5", font=("Segoe UI", 10))
        style.configure("TButton", padding=6, font=("Segoe UI", 10))
        style.configure("TCheckbutton", background="#f5f5f5")
        style.configure("TRadiobutton", background="#f5f5f5")
        style.configure("Selected.TButton", background="#1976d2", foreground="white")
        style.configure("Unselected.TButton", background="#e0e0e0")

    def _on_state_changed(self, state: SessionState) -> None:
        self._render()

    def _render(self) -> None:
        if self.session.is_complete():
            self._rendered_index = None
            self.final_frame.tkraise()
            return
        if self._rendered_index != self.session.current_index:
            self._show_question()
        elif isinstance(self.session.current_question, TrueFalse):
            self._build_true_false()
        self._update_next_button()
        self.question_frame.tkraise()

    def _clear_inputs(self) -> None:
        for widget in self.input_frame.winfo_children():
            widget.destroy()

    def _show_question(self) -> None:
        session = self.session
        question = session.current_question
        answer = session.current_answer
        self._rendered_index = session.current_index
        self.progress_label.config(
            text=f"Question {session.current_index + 1} of {session.question_count}"
        )
        self.question_label.config(text=question.text)

        if isinstance(question, TrueFalse):
            self._build_true_false()
        elif isinstance(question, SingleChoice):
            self._clear_inputs()
            self.choice_var.set(-1 if answer is None else answer)
            for idx, option in enumerate(question.options):
                ttk.Radiobutton(
                    self.input_frame,
                    text=option,
                    value=idx,
                    variable=self.choice_var,
                    command=lambda: session.record_answer(self.choice_var.get()),
                ).pack(anchor=tk.W, pady=4)
        elif isinstance(question, MultiChoice):
            self._clear_inputs()
            selected = answer or frozenset()
            self.check_vars = [tk.BooleanVar(value=idx in selected) for idx in range(len(question.options))]
            for idx, option in enumerate(question.options):
                ttk.Checkbutton(
                    self.input_frame,
                    text=option,
                    variable=self.check_vars[idx],
                    command=self._save_checked,
                ).pack(anchor=tk.W, pady=4)
        elif isinstance(question, TextEntry):
            self._clear_inputs()
            ttk.Label(self.input_frame, text="Your Answer").pack(anchor=tk.W)
            self.text_var = tk.StringVar(value=answer or "")
            entry = ttk.Entry(self.input_frame, textvariable=self.text_var)
            entry.pack(fill=tk.X, pady=4)
            self.text_var.trace_add(
                "write", lambda *_: session.record_answer(self.text_var.get())
            )
            entry.focus_set()

    def _build_true_false(self) -> None:
        self._clear_inputs()
        selected = self.session.current_answer
        row = ttk.Frame(self.input_frame)
        row.pack(fill=tk.X)
        for label, value in (("True", True), ("False", False)):
            ttk.Button(
                row,
                text=label,
                style="Selected.TButton" if selected is value else "Unselected.TButton",
                command=lambda v=value: self.session.record_answer(v),
            ).pack(side=tk.LEFT, expand=True, padx=8)

    def _save_checked(self) -> None:
        picks = frozenset(idx for idx, var in enumerate(self.check_vars) if var.get())
        self.session.record_answer(picks)

    def _update_next_button(self) -> None:
        self.next_button.config(
            text="Submit" if self.session.is_last_question else "Next",
            state=tk.NORMAL if self.session.can_proceed_current() else tk.DISABLED,
        )

    def _next_question(self) -> None:
        if self.session.can_proceed_current():
            self.session.advance()

    def _close(self) -> None:
        self._unsubscribe()
        self.destroy()


if __name__ == "__main__":
    setup_console_logging(LOG_LEVEL)
    app = QuizApp(QuizSession(load_catalog(CATALOG_FILE)))
    app.mainloop()
