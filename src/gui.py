"""Desktop window front-end (tkinter).

The window holds widgets only; every task change goes through the shared
actions in `view`, and the list and status bar are redrawn from the
controller's listener callback.
"""
import logging
import tkinter as tk
from tkinter import messagebox
from typing import Optional

from models import Status
from tasklist import TaskListController
import theme
import view

logger = logging.getLogger(__name__)

FONT = ("Segoe UI", 14)
FONT_SMALL = ("Segoe UI", 12)
FONT_BUTTON = ("Segoe UI", 12, "bold")
FONT_TITLE = ("Segoe UI", 24, "bold")


class TodoWindow:
    def __init__(self, root: tk.Tk, controller: TaskListController, geometry: str = "500x600"):
        self.root = root
        self.controller = controller
        self.root.title("\U0001F4DD To-Do List")
        self.root.geometry(geometry)
        self.root.minsize(360, 400)
        self.root.configure(bg=theme.HEX_BACKGROUND)
        self._center(geometry)

        main = tk.Frame(root, bg=theme.HEX_BACKGROUND, padx=15, pady=15)
        main.pack(fill=tk.BOTH, expand=True)

        # ----- header: title, entry, add button -----
        tk.Label(main, text=view.TITLE, font=FONT_TITLE, fg=theme.HEX_PRIMARY,
                 bg=theme.HEX_BACKGROUND).pack(anchor=tk.W, pady=(0, 10))
        header = tk.Frame(main, bg=theme.HEX_BACKGROUND)
        header.pack(fill=tk.X)
        self.task_entry = tk.Entry(header, font=FONT, relief=tk.SOLID, bd=2,
                                   highlightcolor=theme.HEX_PRIMARY)
        self.task_entry.pack(side=tk.LEFT, fill=tk.X, expand=True, ipady=6)
        self.task_entry.bind("<Return>", lambda e: self.add_task())
        self.task_entry.bind("<FocusIn>", self._clear_placeholder)
        self.task_entry.bind("<FocusOut>", self._show_placeholder)
        self._styled_button(header, "➕ Add Task", theme.HEX_PRIMARY,
                            self.add_task).pack(side=tk.LEFT, padx=(10, 0))

        # ----- task list -----
        list_frame = tk.LabelFrame(main, text="Your Tasks", font=FONT_BUTTON,
                                   fg=theme.HEX_PRIMARY, bg=theme.HEX_BACKGROUND)
        list_frame.pack(fill=tk.BOTH, expand=True, pady=10)
        scrollbar = tk.Scrollbar(list_frame)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        self.listbox = tk.Listbox(list_frame, font=FONT, selectmode=tk.SINGLE,
                                  bg="white", activestyle=tk.NONE,
                                  yscrollcommand=scrollbar.set, exportselection=False)
        self.listbox.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=5, pady=5)
        scrollbar.config(command=self.listbox.yview)
        self.listbox.bind("<<ListboxSelect>>", self._on_select)
        self.listbox.bind("<Double-Button-1>", lambda e: self.mark_complete())
        self.listbox.bind("<Delete>", lambda e: self.delete_task())

        # ----- buttons -----
        buttons = tk.Frame(main, bg=theme.HEX_BACKGROUND)
        buttons.pack()
        self._styled_button(buttons, "✅ Mark Complete", theme.HEX_DONE,
                            self.mark_complete).pack(side=tk.LEFT, padx=5)
        self._styled_button(buttons, "\U0001F5D1 Delete Task", theme.HEX_ACCENT,
                            self.delete_task).pack(side=tk.LEFT, padx=5)
        self._styled_button(buttons, "\U0001F9F9 Clear All", theme.HEX_NEUTRAL,
                            self.clear_all).pack(side=tk.LEFT, padx=5)

        # ----- status bar -----
        self.status_var = tk.StringVar(value=view.status_text(view.initial_status(controller)))
        tk.Label(root, textvariable=self.status_var, font=FONT_SMALL, fg="#404040",
                 bg="white", anchor=tk.W, padx=10, pady=5).pack(side=tk.BOTTOM, fill=tk.X)

        self._show_placeholder()
        controller.subscribe(self._on_status)
        self.populate_listbox()

    # ----- widgets -----
    @staticmethod
    def _styled_button(parent: tk.Misc, text: str, bg: str, command) -> tk.Button:
        button = tk.Button(parent, text=text, font=FONT_BUTTON, bg=bg, fg="white",
                           activebackground=bg, activeforeground="white",
                           relief=tk.FLAT, padx=15, pady=8, cursor="hand2", command=command)
        button.bind("<Enter>", lambda e: button.configure(bg=theme.lighter(bg)))
        button.bind("<Leave>", lambda e: button.configure(bg=bg))
        return button

    def _center(self, geometry: str) -> None:
        w, _, h = geometry.partition("x")
        x = max(0, (self.root.winfo_screenwidth() - int(w)) // 2)
        y = max(0, (self.root.winfo_screenheight() - int(h)) // 2)
        self.root.geometry(f"{geometry}+{x}+{y}")

    def _clear_placeholder(self, event=None) -> None:
        if view.is_placeholder(self.task_entry.get()):
            self.task_entry.delete(0, tk.END)
            self.task_entry.configure(fg="black")

    def _show_placeholder(self, event=None) -> None:
        if not self.task_entry.get():
            self.task_entry.insert(0, view.PLACEHOLDER)
            self.task_entry.configure(fg="gray")

    # ----- actions -----
    def add_task(self) -> None:
        feedback = view.add_action(self.controller, self.task_entry.get())
        if feedback.kind == view.SUCCESS:
            self.task_entry.delete(0, tk.END)
            self.task_entry.configure(fg="black")
            self.task_entry.focus_set()
        self._show(feedback)

    def delete_task(self) -> None:
        self._show(view.delete_action(self.controller, None, self._confirm))

    def mark_complete(self) -> None:
        self._show(view.complete_action(self.controller, None))

    def clear_all(self) -> None:
        self._show(view.clear_action(self.controller, self._confirm))

    def _confirm(self, title: str, message: str) -> bool:
        return messagebox.askyesno(title, message, parent=self.root)

    def _show(self, feedback: Optional[view.Feedback]) -> None:
        if feedback is None:
            return
        if feedback.kind == view.WARNING:
            messagebox.showwarning(feedback.title, feedback.message, parent=self.root)
        else:
            messagebox.showinfo(feedback.title, feedback.message, parent=self.root)

    # ----- controller events -----
    def _on_select(self, event=None) -> None:
        selection = self.listbox.curselection()
        self.controller.select(selection[0] if selection else None)

    def _on_status(self, status: Status) -> None:
        self.status_var.set(view.status_text(status))
        self.populate_listbox()

    def populate_listbox(self) -> None:
        self.listbox.delete(0, tk.END)
        for task in self.controller.snapshot():
            self.listbox.insert(tk.END, view.task_label(task))
            self.listbox.itemconfig(tk.END, fg="gray" if task.completed else "black")
        selected = self.controller.selected
        if selected is not None:
            self.listbox.selection_set(selected)
            self.listbox.see(selected)



def run(controller: TaskListController, geometry: str = "500x600") -> None:
    root = tk.Tk()
    TodoWindow(root, controller, geometry)
    logger.debug("window started")
    root.mainloop()
