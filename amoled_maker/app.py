import customtkinter as ctk

from amoled_maker.config import AppConfig
from amoled_maker.controllers.app_controller import AppController
from amoled_maker.ui.control_bar import ControlBar
from amoled_maker.ui.preview_pane import PreviewPane
from amoled_maker.ui.sidebar import Sidebar


class AmoledMakerApp(ctk.CTk):
    def __init__(self, config: AppConfig = AppConfig()) -> None:
        super().__init__()
        ctk.set_appearance_mode(config.appearance_mode)
        ctk.set_default_color_theme(config.color_theme)

        self.title(config.title)
        self.minsize(*config.min_size)

        # root layout: controls on top, two previews below, sidebar on the right
        self.grid_columnconfigure((0, 1), weight=1)
        self.grid_rowconfigure(0, weight=0)
        self.grid_rowconfigure(1, weight=1)

        self._controls = ControlBar(self)
        self._controls.grid(row=0, column=0, columnspan=2, sticky="ew", padx=(12, 6), pady=(12, 6))

        self._before = PreviewPane(self, caption="Оригинал")
        self._before.grid(row=1, column=0, sticky="nsew", padx=(12, 6), pady=(6, 12))

        self._after = PreviewPane(self, caption="AMOLED")
        self._after.grid(row=1, column=1, sticky="nsew", padx=6, pady=(6, 12))

        self._sidebar = Sidebar(self)
        self._sidebar.grid(row=0, column=2, rowspan=2, sticky="ns", padx=(6, 12), pady=12)

        self._controller = AppController(
            control_bar=self._controls,
            before_pane=self._before,
            after_pane=self._after,
            sidebar=self._sidebar,
            window=self,
            black_point=config.default_black_point,
        )
        self._controller.bind_events()
