from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel, QPushButton


class LandingPage(QWidget):
    """Tela inicial: apresentação + acesso ao login."""

    navigate = Signal(str)

    def __init__(self, parent=None):
        super().__init__(parent)

        lay = QVBoxLayout(self)
        lay.setContentsMargins(64, 64, 64, 64)
        lay.setSpacing(16)
        lay.addStretch(1)

        self.lbl_title = QLabel("Bem-vindo ao AtuaPJ")
        self.lbl_title.setObjectName("H0")
        self.lbl_title.setAlignment(Qt.AlignHCenter)
        lay.addWidget(self.lbl_title)

        self.lbl_subtitle = QLabel("Plataforma de gestão de profissionais PJ")
        self.lbl_subtitle.setObjectName("Muted")
        self.lbl_subtitle.setAlignment(Qt.AlignHCenter)
        lay.addWidget(self.lbl_subtitle)

        lay.addSpacing(24)

        self.btn_login = QPushButton("Acessar Login")
        self.btn_login.setProperty("role", "primary")
        self.btn_login.setCursor(Qt.PointingHandCursor)
        self.btn_login.clicked.connect(lambda: self.navigate.emit("login"))
        lay.addWidget(self.btn_login, 0, Qt.AlignHCenter)

        lay.addStretch(1)
