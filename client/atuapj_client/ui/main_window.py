from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import QDialog, QMainWindow, QStackedWidget, QWidget, QHBoxLayout

from atuapj_client.core.api import ApiClient
from atuapj_client.core.datas import date_formatter
from atuapj_client.core.models import Configuracoes
from atuapj_client.core.state import AppState
from atuapj_client.db.repositories import ConfiguracoesRepository

from atuapj_client.ui.components.my_invoices import MyInvoices
from atuapj_client.ui.components.sidebar import Sidebar
from atuapj_client.ui.dialogs.identify_dialog import IdentifyDialog
from atuapj_client.ui.pages.landing import LandingPage
from atuapj_client.ui.pages.meu_financeiro import MeuFinanceiroPage
from atuapj_client.ui.pages.settings import SettingsPage


class MainWindow(QMainWindow):
    def __init__(
        self,
        api: Optional[ApiClient] = None,
        repo: Optional[ConfiguracoesRepository] = None,
    ):
        super().__init__()
        self.setWindowTitle("AtuaPJ")

        self.api = api or ApiClient()
        self.repo = repo or ConfiguracoesRepository()

        # Estado compartilhado (membro logado + preferências)
        self.state = AppState()
        self.state.configuracoes = self.repo.get()

        # Layout raiz: Sidebar + área principal
        central = QWidget()
        root = QHBoxLayout(central)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        self.sidebar = Sidebar()
        self.sidebar.navigate.connect(self._navigate)

        self.stack = QStackedWidget()

        # Páginas
        self.invoices = MyInvoices(self.api, date_formatter(self.state.configuracoes))
        self.page_landing = LandingPage()
        self.page_landing.navigate.connect(self._navigate)
        self.page_meu_financeiro = MeuFinanceiroPage(self.invoices)
        self.page_settings = SettingsPage(self.repo, on_saved=self._on_settings_saved)

        self._pages = {
            "landing": self.page_landing,
            "meu_financeiro": self.page_meu_financeiro,
            "settings": self.page_settings,
        }
        for key in ("landing", "meu_financeiro", "settings"):
            self.stack.addWidget(self._pages[key])

        root.addWidget(self.sidebar)
        root.addWidget(self.stack, 1)
        self.setCentralWidget(central)

        self.show_landing()

    def show_landing(self):
        self.sidebar.setVisible(False)
        self.stack.setCurrentWidget(self.page_landing)

    def _navigate(self, key: str):
        if key == "login":
            self._identify()
            return
        if key in ("meu_financeiro", "settings"):
            self.sidebar.setVisible(True)
            self.sidebar.set_active(key)
            self.stack.setCurrentWidget(self._pages[key])

    def _identify(self):
        dlg = IdentifyDialog(
            self.state.current_user_id or "",
            self.state.current_company_id or "",
            parent=self,
        )
        if dlg.exec() != QDialog.DialogCode.Accepted or not dlg.selected:
            return
        user_id, company_id = dlg.selected
        self.enter_dashboard(user_id, company_id)

    def enter_dashboard(self, user_id: str, company_id: Optional[str] = None):
        self.state.current_user_id = user_id
        self.state.current_company_id = company_id
        self.invoices.set_member(user_id, company_id)
        self._navigate("meu_financeiro")

    def _on_settings_saved(self, cfg: Configuracoes):
        # datas já exibidas passam a usar o novo formato/fuso
        self.state.configuracoes = cfg
        self.invoices.set_formatter(date_formatter(cfg))

    def closeEvent(self, event):
        self.api.close()
        super().closeEvent(event)
