from __future__ import annotations

from typing import Callable, List, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFrame, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QTableWidget, QTableWidgetItem,
    QHeaderView, QAbstractItemView,
)

from atuapj_client.core.api import ApiClient, ApiError
from atuapj_client.core.competencia import fmt_mes, format_brl
from atuapj_client.core.models import MemberPayment


class MyInvoices(QFrame):
    """Pagamentos mensais do membro logado (mês, valor, última atualização)."""

    COLUMNS = ("Mês", "Valor", "Atualizado em")

    def __init__(
        self,
        api: ApiClient,
        formatter: Callable[[Optional[str]], str],
        user_id: Optional[str] = None,
        company_id: Optional[str] = None,
        parent=None,
    ):
        super().__init__(parent)
        self.setObjectName("Card")
        self.api = api
        self.formatter = formatter
        self.user_id = user_id
        self.company_id = company_id
        self.payments: List[MemberPayment] = []

        lay = QVBoxLayout(self)
        lay.setContentsMargins(16, 16, 16, 16)
        lay.setSpacing(10)

        top = QHBoxLayout()
        title = QLabel("Minhas faturas")
        title.setObjectName("H2")
        top.addWidget(title)
        top.addStretch(1)
        self.btn_reload = QPushButton("Atualizar")
        self.btn_reload.clicked.connect(self.reload)
        top.addWidget(self.btn_reload)
        lay.addLayout(top)

        self.lbl_status = QLabel("")
        self.lbl_status.setObjectName("Muted")
        self.lbl_status.setWordWrap(True)
        lay.addWidget(self.lbl_status)

        self.table = QTableWidget(0, len(self.COLUMNS))
        self.table.setHorizontalHeaderLabels(list(self.COLUMNS))
        self.table.verticalHeader().setVisible(False)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setAlternatingRowColors(True)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        lay.addWidget(self.table, 1)

    def set_member(self, user_id: Optional[str], company_id: Optional[str]) -> None:
        self.user_id = user_id
        self.company_id = company_id
        self.reload()

    def set_formatter(self, formatter: Callable[[Optional[str]], str]) -> None:
        self.formatter = formatter
        self._render()

    def reload(self) -> None:
        if not self.user_id:
            self.payments = []
            self._show_status("Nenhum membro selecionado.")
            self._render()
            return
        try:
            payments = self.api.list_member_payments(user_id=self.user_id, company_id=self.company_id)
        except ApiError as exc:
            self.payments = []
            self._render()
            self._show_status(f"Erro ao carregar faturas: {exc.detail}", error=True)
            return
        self.payments = sorted(payments, key=lambda p: p.mes, reverse=True)
        self._show_status("" if self.payments else "Nenhuma fatura encontrada.")
        self._render()

    def _show_status(self, text: str, error: bool = False) -> None:
        self.lbl_status.setObjectName("Error" if error else "Muted")
        self.lbl_status.style().unpolish(self.lbl_status)
        self.lbl_status.style().polish(self.lbl_status)
        self.lbl_status.setText(text)

    def _render(self) -> None:
        self.table.setRowCount(len(self.payments))
        for row, p in enumerate(self.payments):
            cells = (fmt_mes(p.mes), format_brl(p.valor), self.formatter(p.updated_at))
            for col, text in enumerate(cells):
                item = QTableWidgetItem(text)
                if col == 1:
                    item.setTextAlignment(Qt.AlignRight | Qt.AlignVCenter)
                self.table.setItem(row, col, item)
