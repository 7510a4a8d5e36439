from __future__ import annotations

from typing import Optional, Tuple

from PySide6.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QFormLayout,
    QLineEdit,
    QLabel,
    QDialogButtonBox,
    QMessageBox,
)


class IdentifyDialog(QDialog):
    """Seleciona o membro e a empresa da sessão (sem senha)."""

    def __init__(self, user_id: str = "", company_id: str = "", parent=None):
        super().__init__(parent)
        self.setWindowTitle("Entrar")

        lay = QVBoxLayout(self)
        hint = QLabel("Informe o membro e a empresa para ver suas faturas.")
        hint.setObjectName("Muted")
        lay.addWidget(hint)

        form = QFormLayout()
        self.ed_user = QLineEdit(user_id)
        self.ed_user.setPlaceholderText("ID do membro")
        self.ed_company = QLineEdit(company_id)
        self.ed_company.setPlaceholderText("ID da empresa (opcional)")
        form.addRow("Membro", self.ed_user)
        form.addRow("Empresa", self.ed_company)
        lay.addLayout(form)

        btns = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        btns.accepted.connect(self._accept)
        btns.rejected.connect(self.reject)
        lay.addWidget(btns)

        self._selected: Optional[Tuple[str, Optional[str]]] = None

    def _accept(self) -> None:
        user_id = self.ed_user.text().strip()
        if not user_id:
            QMessageBox.warning(self, "Entrar", "Informe o ID do membro.")
            return
        company_id = self.ed_company.text().strip() or None
        self._selected = (user_id, company_id)
        self.accept()

    @property
    def selected(self) -> Optional[Tuple[str, Optional[str]]]:
        return self._selected
