from __future__ import annotations

from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel


class MeuFinanceiroPage(QWidget):
    def __init__(self, invoices_view: QWidget, parent=None):
        super().__init__(parent)
        self.invoices_view = invoices_view

        lay = QVBoxLayout(self)
        lay.setContentsMargins(24, 24, 24, 24)
        lay.setSpacing(6)

        self.lbl_title = QLabel("Meu Financeiro")
        self.lbl_title.setObjectName("H1")
        lay.addWidget(self.lbl_title)

        self.lbl_subtitle = QLabel("Visualização de suas faturas")
        self.lbl_subtitle.setObjectName("Muted")
        lay.addWidget(self.lbl_subtitle)

        lay.addSpacing(18)
        lay.addWidget(invoices_view, 1)
