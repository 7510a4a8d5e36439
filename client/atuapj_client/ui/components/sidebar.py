from __future__ import annotations

from typing import Dict

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QFrame, QVBoxLayout, QPushButton, QLabel


class Sidebar(QFrame):
    """Menu lateral simples (lista) com expandir/recolher."""

    navigate = Signal(str)  # page key

    ITEMS = (
        ("meu_financeiro", "Meu Financeiro"),
        ("settings", "Configurações"),
    )

    def __init__(self):
        super().__init__()
        self.setObjectName("Sidebar")
        self._expanded = True
        self._expanded_w = 220
        self._collapsed_w = 64

        lay = QVBoxLayout(self)
        lay.setContentsMargins(12, 14, 12, 12)
        lay.setSpacing(10)

        self.brand = QLabel("AtuaPJ")
        self.brand.setObjectName("H1")
        self.brand.setAlignment(Qt.AlignHCenter | Qt.AlignTop)
        lay.addWidget(self.brand, 0, Qt.AlignTop)

        self.btn_toggle = QPushButton("≡")
        self.btn_toggle.setObjectName("SidebarToggle")
        self.btn_toggle.clicked.connect(self.toggle)
        lay.addWidget(self.btn_toggle, 0, Qt.AlignTop)

        self._buttons: Dict[str, QPushButton] = {}
        for key, label in self.ITEMS:
            b = QPushButton(label)
            b.setCheckable(True)
            b.setProperty("role", "nav")
            b.setProperty("fullText", label)
            b.clicked.connect(lambda _, k=key: self.navigate.emit(k))
            self._buttons[key] = b
            lay.addWidget(b)

        lay.addStretch(1)
        self.setFixedWidth(self._expanded_w)

    def set_active(self, key: str):
        for k, b in self._buttons.items():
            b.setChecked(k == key)

    def toggle(self):
        self._expanded = not self._expanded
        self.setFixedWidth(self._expanded_w if self._expanded else self._collapsed_w)
        self.brand.setText("AtuaPJ" if self._expanded else "PJ")

        # Quando recolhido, mostra só "•" para manter click targets
        for b in self._buttons.values():
            b.setText(str(b.property("fullText")) if self._expanded else "•")
