"""
View layer for the Knowledge Manager GUI.
Tkinter widgets and layout, delegates all logic to controller.
Uses event system for communication.
"""

import tkinter as tk
from tkinter import ttk, messagebox, filedialog
from typing import List, Optional, Set
from controller import ActionResult, AppState, ExitChoice, KnowledgeController
from knowledge_base.core.tags import resolve_tags
from knowledge_base.events import EventType, Event

FILE_TYPES = [("Text files", "*.txt"), ("All files", "*.*")]


class TagSelectionDialog(tk.Toplevel):
    """Modal dialog: tick existing tags or type new comma-separated ones."""

    def __init__(self, parent: tk.Widget, existing_tags: List[str]):
        super().__init__(parent)
        self.title("Select or Add Tags")
        self.geometry("300x200")
        self.transient(parent)

        self.existing_tags = existing_tags
        self.result: Set[str] = set()

        new_tag_frame = ttk.Frame(self, padding="5")
        new_tag_frame.pack(side=tk.TOP, fill=tk.X)
        ttk.Label(new_tag_frame, text="New Tags (comma-separated):").pack(side=tk.TOP, anchor="w")
        self.new_tag_entry = ttk.Entry(new_tag_frame, width=20)
        self.new_tag_entry.pack(side=tk.TOP, fill=tk.X)
        self.new_tag_entry.bind("<Return>", lambda _e: self._on_ok())

        ttk.Button(self, text="OK", command=self._on_ok).pack(side=tk.BOTTOM, pady=5)

        # Checkboxes for existing tags, scrollable
        list_frame = ttk.Frame(self)
        list_frame.pack(side=tk.TOP, fill=tk.BOTH, expand=True)
        canvas = tk.Canvas(list_frame, highlightthickness=0)
        scrollbar = ttk.Scrollbar(list_frame, orient="vertical", command=canvas.yview)
        checkbox_frame = ttk.Frame(canvas)
        checkbox_frame.bind(
            "<Configure>",
            lambda _e: canvas.configure(scrollregion=canvas.bbox("all"))
        )
        canvas.create_window((0, 0), window=checkbox_frame, anchor="nw")
        canvas.configure(yscrollcommand=scrollbar.set)
        canvas.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)

        self.check_vars = {}
        for tag in existing_tags:
            var = tk.BooleanVar(value=False)
            ttk.Checkbutton(checkbox_frame, text=tag, variable=var).pack(anchor="w")
            self.check_vars[tag] = var

        self.protocol("WM_DELETE_WINDOW", self._on_ok)
        self.new_tag_entry.focus_set()

    def _on_ok(self) -> None:
        checked = [tag for tag, var in self.check_vars.items() if var.get()]
        self.result = resolve_tags(self.existing_tags, checked, self.new_tag_entry.get())
        self.destroy()

    def show(self) -> Set[str]:
        """Block until the dialog closes and return the chosen tags."""
        self.grab_set()
        self.wait_window()
        return self.result


class KnowledgeView:
    """
    Main application window for the knowledge manager.
    Thin wrapper around Tkinter, delegates all logic to controller.
    Uses event system for communication.
    """

    def __init__(self, root: tk.Tk, controller: KnowledgeController):
        self.root = root
        self.controller = controller

        self.root.title("Knowledge Manager")
        self.root.geometry("600x400")
        self.root.minsize(400, 250)
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

        self._setup_event_listeners()
        self._create_widgets()

    def _setup_event_listeners(self) -> None:
        """Set up event listeners for controller events."""
        dispatcher = self.controller.event_dispatcher
        dispatcher.add_listener(EventType.STATUS_UPDATED, self._on_status_updated)
        dispatcher.add_listener(EventType.ERROR_OCCURRED, self._on_error_occurred)
        dispatcher.add_listener(EventType.TAGS_CHANGED, self._on_tags_changed)
        dispatcher.add_listener(EventType.EXIT_STATE_CHANGED, self._on_exit_state_changed)

    def _create_widgets(self) -> None:
        """Create and layout all widgets."""
        main_frame = ttk.Frame(self.root, padding="5")
        main_frame.grid(row=0, column=0, sticky="nsew")

        self.root.columnconfigure(0, weight=1)
        self.root.rowconfigure(0, weight=1)
        main_frame.columnconfigure(0, weight=1)
        main_frame.rowconfigure(1, weight=1)

        # === Button Section ===
        button_frame = ttk.Frame(main_frame)
        button_frame.grid(row=0, column=0, columnspan=2, pady=(0, 5))

        ttk.Button(button_frame, text="Add", command=self._on_add).pack(side=tk.LEFT, padx=5)
        ttk.Button(button_frame, text="Delete", command=self._on_delete).pack(side=tk.LEFT, padx=5)
        ttk.Button(button_frame, text="Undo Delete", command=self._on_undo).pack(side=tk.LEFT, padx=5)

        # === Editor Section ===
        editor_frame = ttk.Frame(main_frame)
        editor_frame.grid(row=1, column=0, sticky="nsew")
        editor_frame.columnconfigure(0, weight=1)
        editor_frame.rowconfigure(0, weight=1)

        self.knowledge_text = tk.Text(editor_frame, wrap=tk.WORD)
        self.knowledge_text.grid(row=0, column=0, sticky="nsew")
        text_scrollbar = ttk.Scrollbar(editor_frame, orient="vertical", command=self.knowledge_text.yview)
        text_scrollbar.grid(row=0, column=1, sticky="ns")
        self.knowledge_text.configure(yscrollcommand=text_scrollbar.set)

        # === Tag List Section ===
        list_frame = ttk.Frame(main_frame)
        list_frame.grid(row=1, column=1, sticky="ns", padx=(5, 0))
        list_frame.rowconfigure(0, weight=1)

        self.tags_list = tk.Listbox(list_frame, exportselection=False, width=20)
        self.tags_list.grid(row=0, column=0, sticky="ns")
        list_scrollbar = ttk.Scrollbar(list_frame, orient="vertical", command=self.tags_list.yview)
        list_scrollbar.grid(row=0, column=1, sticky="ns")
        self.tags_list.configure(yscrollcommand=list_scrollbar.set)
        self.tags_list.bind("<<ListboxSelect>>", self._on_tag_selected)

        # === Status Section ===
        self.status_label = ttk.Label(main_frame, text="Ready", relief=tk.SUNKEN, anchor="w")
        self.status_label.grid(row=2, column=0, columnspan=2, sticky="ew", pady=(5, 0))

        self._refresh_tags(self.controller.tags())

    def _get_editor_text(self) -> str:
        """Get editor content without the newline Tk always appends."""
        return self.knowledge_text.get("1.0", "end-1c")

    def _set_editor_text(self, text: str) -> None:
        self.knowledge_text.delete("1.0", tk.END)
        self.knowledge_text.insert("1.0", text)

    def _selected_tag(self) -> Optional[str]:
        selection = self.tags_list.curselection()
        if not selection:
            return None
        return self.tags_list.get(selection[0])

    def _refresh_tags(self, tags: List[str]) -> None:
        self.tags_list.delete(0, tk.END)
        for tag in tags:
            self.tags_list.insert(tk.END, tag)

    def _update_status(self, message: str) -> None:
        """Update status bar message."""
        self.status_label.configure(text=message)

    def _on_status_updated(self, event: Event) -> None:
        self._update_status(event.data)

    def _on_error_occurred(self, event: Event) -> None:
        self._update_status(f"Error: {event.data}")

    def _on_tags_changed(self, event: Event) -> None:
        self._refresh_tags(event.data)

    def _on_exit_state_changed(self, event: Event) -> None:
        if event.data is AppState.TERMINATED:
            self.root.destroy()

    def _on_tag_selected(self, _event=None) -> None:
        """Show the selected tag's knowledge in the editor."""
        text = self.controller.get_knowledge(self._selected_tag())
        if text is not None:
            self._set_editor_text(text)

    def _on_add(self) -> None:
        """Handle Add button click."""
        text = self._get_editor_text()
        if not text.strip():
            messagebox.showinfo("Add", "Please enter knowledge.", parent=self.root)
            return

        tags = TagSelectionDialog(self.root, self.controller.tags()).show()
        result = self.controller.add_knowledge(text, tags)
        if not result.success:
            self._update_status(result.message)

    def _on_delete(self) -> None:
        """Handle Delete button click."""
        self.controller.delete_tag(self._selected_tag())

    def _on_undo(self) -> None:
        """Handle Undo Delete button click."""
        self.controller.undo_delete(self._get_editor_text())

    def _on_close(self) -> None:
        """Ask whether to save before closing the window."""
        self.controller.request_exit()
        answer = messagebox.askyesnocancel("Exit", "Do you want to save?", parent=self.root)

        if answer is None:
            self.controller.exit_and_maybe_save(ExitChoice.CANCEL)
        elif answer:
            path = filedialog.asksaveasfilename(
                title="Save Knowledge",
                defaultextension=".txt",
                filetypes=FILE_TYPES,
                parent=self.root
            )
            state = self.controller.exit_and_maybe_save(ExitChoice.SAVE, path or None)
            if path and state is AppState.RUNNING:
                messagebox.showerror("Error", "Could not save knowledge.", parent=self.root)
        else:
            self.controller.exit_and_maybe_save(ExitChoice.DISCARD)

    def load_initial(self) -> None:
        """Ask for a knowledge file at startup; cancelling loads the backup."""
        options = {}
        last_file = self.controller.last_file()
        if last_file:
            options = {"initialdir": str(last_file.parent), "initialfile": last_file.name}

        path = filedialog.askopenfilename(
            title="Open Knowledge",
            filetypes=FILE_TYPES,
            parent=self.root,
            **options
        )
        self._handle_result(self.controller.load_knowledge(path or None))

    def _handle_result(self, result: ActionResult) -> None:
        """Report a failed action in an error box."""
        if not result.success and result.error:
            messagebox.showerror("Error", result.message, parent=self.root)
        else:
            self._update_status(result.message)

    def run(self) -> None:
        """Start the main event loop."""
        self.root.mainloop()
