"""Interface Tkinter principale."""

from __future__ import annotations

import logging
import tkinter as tk
from tkinter import ttk

import sv_ttk
from PIL import Image, ImageTk

from urlview.config import ViewerConfig
from urlview.controller import ViewerController
from urlview.services import ImageFetcher
from urlview.state import LoadPhase, ViewSnapshot, ViewState
from urlview.ui.fullscreen import TkFullscreenControl
from urlview.ui.loader import BackgroundImageLoader

logger = logging.getLogger(__name__)

TITLE_COLOR = "#1A237E"
ACCENT_COLOR = "#3F51B5"
BACKGROUND_COLOR = "#E3F2FD"
CARD_COLOR = "#BBDEFB"
SCRIM_COLOR = "#5C6B7A"
STATUS_NEUTRAL_COLOR = "#455A64"
STATUS_ERROR_COLOR = "#D32F2F"
FLOATING_MARGIN = 20
MENU_OFFSET = 80

ERROR_TEXT = "URL d'image invalide"
LOADING_TEXT = "Chargement…"


class MainWindow:
    """Fenêtre principale de la visionneuse."""

    def __init__(self, config: ViewerConfig, state: ViewState | None = None) -> None:
        self._config = config
        self._state = state or ViewState()

        self.root = tk.Tk()
        self.root.title(config.title)
        self.root.geometry(config.geometry)
        self.root.minsize(480, 420)

        sv_ttk.set_theme(config.theme)
        self.root.configure(bg=BACKGROUND_COLOR)
        self._configure_styles()

        self.fullscreen = TkFullscreenControl(self.root)
        self._controller = ViewerController(self._state, self.fullscreen)
        self._loader = BackgroundImageLoader(
            self.root,
            ImageFetcher(
                timeout=config.timeout,
                max_size=config.image_max_size,
                max_bytes=config.max_bytes,
            ),
        )

        self._url_var = tk.StringVar()
        self._photo: ImageTk.PhotoImage | None = None
        self._loading_url: str | None = None

        self.root.columnconfigure(0, weight=1)
        self.root.rowconfigure(0, weight=1)

        self._build_main_area()
        self._build_floating_menu()
        self.root.bind("<Escape>", lambda _: self._controller.on_escape())

        self._unsubscribe = self._state.subscribe(self._render)
        self._render(self._state.snapshot())

    # --------------------------------------------------------------------- UI -
    def _configure_styles(self) -> None:
        style = ttk.Style()
        style.configure("Main.TFrame", background=BACKGROUND_COLOR)
        style.configure("Card.TFrame", background=CARD_COLOR)
        style.configure(
            "Title.TLabel",
            background=BACKGROUND_COLOR,
            foreground=TITLE_COLOR,
            font=("Helvetica", 28, "bold"),
        )
        style.configure(
            "Link.TLabel",
            background=BACKGROUND_COLOR,
            foreground=ACCENT_COLOR,
            font=("Helvetica", 14),
        )
        style.configure(
            "Status.TLabel",
            background=CARD_COLOR,
            foreground=STATUS_NEUTRAL_COLOR,
            font=("Helvetica", 11),
        )
        style.configure(
            "ErrorIcon.TLabel",
            background=CARD_COLOR,
            foreground=STATUS_ERROR_COLOR,
            font=("Helvetica", 40),
        )
        style.configure(
            "Error.TLabel",
            background=CARD_COLOR,
            foreground=STATUS_ERROR_COLOR,
            font=("Helvetica", 12),
        )
        style.configure("Image.TLabel", background=CARD_COLOR)
        style.configure("Accent.TButton", font=("Helvetica", 11, "bold"), padding=(24, 10))
        style.configure("Floating.TButton", font=("Helvetica", 16, "bold"), padding=(14, 8))
        style.configure("Menu.TButton", padding=(16, 8))
        self.root.option_add("*Font", "Helvetica 11")

    def _build_main_area(self) -> None:
        main_frame = ttk.Frame(self.root, padding=(24, 16), style="Main.TFrame")
        main_frame.grid(row=0, column=0, sticky="nsew")
        main_frame.columnconfigure(0, weight=1)
        main_frame.rowconfigure(3, weight=1)

        self._title_label = ttk.Label(main_frame, text=self._config.title, style="Title.TLabel")
        self._title_label.grid(row=0, column=0, pady=(8, 16))

        input_frame = ttk.Frame(main_frame, style="Main.TFrame")
        input_frame.grid(row=1, column=0, sticky="ew", padx=24, pady=(0, 16))
        input_frame.columnconfigure(1, weight=1)

        link_icon = ttk.Label(input_frame, text="🔗", style="Link.TLabel")
        link_icon.grid(row=0, column=0, padx=(0, 8))

        self._url_entry = ttk.Entry(input_frame, textvariable=self._url_var)
        self._url_entry.grid(row=0, column=1, sticky="ew", ipady=6)
        self._url_entry.bind("<Return>", lambda _: self.load_image())
        self._url_entry.focus()

        self._load_button = ttk.Button(
            main_frame,
            text="Charger l'image",
            command=self.load_image,
            style="Accent.TButton",
        )
        self._load_button.grid(row=2, column=0, pady=(0, 24))

        self._image_frame = ttk.Frame(main_frame, style="Card.TFrame", padding=(24, 24))
        self._image_frame.grid(row=3, column=0, sticky="nsew", padx=24, pady=(0, 24))
        self._image_frame.columnconfigure(0, weight=1)
        self._image_frame.rowconfigure(0, weight=1)

        self._image_label = ttk.Label(
            self._image_frame,
            style="Image.TLabel",
            anchor="center",
            cursor="hand2",
        )
        self._image_label.grid(row=0, column=0)
        self._image_label.bind("<Double-Button-1>", self._on_image_double_click)

        self._status_label = ttk.Label(self._image_frame, text=LOADING_TEXT, style="Status.TLabel")
        self._status_label.grid(row=0, column=0)

        self._error_frame = ttk.Frame(self._image_frame, style="Card.TFrame")
        self._error_frame.grid(row=0, column=0)
        error_icon = ttk.Label(self._error_frame, text="⚠", style="ErrorIcon.TLabel")
        error_icon.pack()
        error_text = ttk.Label(self._error_frame, text=ERROR_TEXT, style="Error.TLabel")
        error_text.pack(pady=(16, 0))
        for widget in (self._error_frame, error_icon, error_text):
            widget.bind("<Double-Button-1>", self._on_image_double_click)

    def _build_floating_menu(self) -> None:
        self._scrim = tk.Frame(self.root, bg=SCRIM_COLOR, cursor="hand2")
        self._scrim.bind("<Button-1>", lambda _: self._controller.on_scrim_pressed())

        self._menu_frame = ttk.Frame(self.root, style="Main.TFrame")
        enter_button = ttk.Button(
            self._menu_frame,
            text="⛶  Plein écran",
            command=self._controller.on_enter_fullscreen,
            style="Menu.TButton",
        )
        enter_button.pack(fill=tk.X)
        exit_button = ttk.Button(
            self._menu_frame,
            text="🗗  Quitter le plein écran",
            command=self._controller.on_exit_fullscreen,
            style="Menu.TButton",
        )
        exit_button.pack(fill=tk.X, pady=(12, 0))

        self._menu_button = ttk.Button(
            self.root,
            text="+",
            command=self._controller.on_menu_button,
            style="Floating.TButton",
        )
        self._menu_button.place(
            relx=1.0,
            rely=1.0,
            x=-FLOATING_MARGIN,
            y=-FLOATING_MARGIN,
            anchor="se",
        )

    # -------------------------------------------------------------- Rendering -
    def _render(self, snapshot: ViewSnapshot) -> None:
        """Met à jour l'interface à partir de l'état courant."""
        self._render_image(snapshot)
        self._render_menu(snapshot)

    def _render_image(self, snapshot: ViewSnapshot) -> None:
        phase = self._state.phase

        if phase is LoadPhase.EMPTY:
            self._loader.cancel()
            self._loading_url = None
            self._set_photo(None)
            self._image_frame.grid_remove()
            return

        self._image_frame.grid()

        if phase is LoadPhase.LOADING:
            if not self._loader.is_pending or self._loading_url != snapshot.image_url:
                self._start_load(snapshot.image_url)
            self._image_label.grid_remove()
            self._error_frame.grid_remove()
            self._status_label.grid()
            return

        self._status_label.grid_remove()
        if phase is LoadPhase.FAILED:
            self._set_photo(None)
            self._image_label.grid_remove()
            self._error_frame.grid()
        else:
            self._error_frame.grid_remove()
            self._image_label.grid()

    def _render_menu(self, snapshot: ViewSnapshot) -> None:
        if snapshot.is_menu_open:
            self._scrim.place(relx=0, rely=0, relwidth=1, relheight=1)
            self._menu_frame.place(
                relx=1.0,
                rely=1.0,
                x=-FLOATING_MARGIN,
                y=-MENU_OFFSET,
                anchor="se",
            )
            self._scrim.lift()
            self._menu_frame.lift()
        else:
            self._scrim.place_forget()
            self._menu_frame.place_forget()
        self._menu_button.lift()

    def _start_load(self, url: str) -> None:
        logger.debug("Lancement du chargement de %s", url)
        self._loading_url = url
        self._set_photo(None)
        self._loader.load(url, on_image=self._show_image, outcome=self._controller)

    def _show_image(self, image: Image.Image) -> None:
        self._set_photo(ImageTk.PhotoImage(image))

    def _set_photo(self, photo: ImageTk.PhotoImage | None) -> None:
        self._photo = photo
        self._image_label.configure(image=photo or "")
        self._image_label.image = photo

    # --------------------------------------------------------------- Callbacks -
    def load_image(self) -> None:
        self._controller.submit_url(self._url_var.get())

    def _on_image_double_click(self, _: tk.Event) -> None:
        self._controller.on_image_double_click()

    # ----------------------------------------------------------------- Public -
    @property
    def controller(self) -> ViewerController:
        return self._controller

    def run(self) -> None:
        self.root.mainloop()

    def destroy(self) -> None:
        self._unsubscribe()
        self._loader.cancel()
        self.root.destroy()
