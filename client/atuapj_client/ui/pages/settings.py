from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QLabel, QFrame, QHBoxLayout, QPushButton,
    QFormLayout, QLineEdit, QComboBox, QDoubleSpinBox, QMessageBox
)

from atuapj_client.core.datas import format_date_br
from atuapj_client.core.lists import FORMATOS_DATA, FORMATO_LABELS, FUSOS_HORARIOS
from atuapj_client.core.models import Configuracoes, now_iso
from atuapj_client.db.repositories import ConfiguracoesRepository


class SettingsPage(QWidget):
    """Tela de Configurações (formato de data, fuso horário, padrões)."""

    def __init__(
        self,
        repo: ConfiguracoesRepository,
        on_saved: Optional[Callable[[Configuracoes], None]] = None,
        parent=None,
    ):
        super().__init__(parent)
        self.repo = repo
        self.on_saved = on_saved

        root = QVBoxLayout(self)
        root.setContentsMargins(18, 18, 18, 18)
        root.setSpacing(12)

        title = QLabel("Configurações")
        title.setObjectName("H0")
        root.addWidget(title)

        card = QFrame()
        card.setObjectName("Card")
        lay = QVBoxLayout(card)
        lay.setContentsMargins(14, 14, 14, 14)
        lay.setSpacing(12)

        form = QFormLayout()
        self.ed_empresa = QLineEdit()
        self.sp_horas = QDoubleSpinBox()
        self.sp_horas.setRange(0.5, 24)
        self.sp_horas.setSingleStep(0.5)
        self.cmb_fuso = QComboBox()
        for value, label in FUSOS_HORARIOS:
            self.cmb_fuso.addItem(label, value)
        self.cmb_formato = QComboBox()
        for value in FORMATOS_DATA:
            self.cmb_formato.addItem(FORMATO_LABELS[value], value)

        form.addRow("Nome da empresa", self.ed_empresa)
        form.addRow("Horas úteis por dia", self.sp_horas)
        form.addRow("Fuso horário", self.cmb_fuso)
        form.addRow("Formato de data", self.cmb_formato)
        lay.addLayout(form)

        self.lbl_preview = QLabel("")
        self.lbl_preview.setObjectName("Caption")
        lay.addWidget(self.lbl_preview)
        self.cmb_fuso.currentIndexChanged.connect(self._update_preview)
        self.cmb_formato.currentIndexChanged.connect(self._update_preview)

        row = QHBoxLayout()
        row.addStretch(1)
        self.btn_save = QPushButton("Salvar")
        self.btn_save.clicked.connect(self._on_save_clicked)
        row.addWidget(self.btn_save)
        lay.addLayout(row)

        root.addWidget(card)
        root.addStretch(1)

        self.load()

    def load(self) -> None:
        cfg = self.repo.get()
        self.ed_empresa.setText(cfg.nome_empresa)
        self.sp_horas.setValue(float(cfg.horas_uteis_padrao))
        idx = self.cmb_fuso.findData(cfg.fuso_horario)
        if idx < 0:
            # fuso fora da lista padrão continua selecionável
            self.cmb_fuso.addItem(cfg.fuso_horario, cfg.fuso_horario)
            idx = self.cmb_fuso.count() - 1
        self.cmb_fuso.setCurrentIndex(idx)
        self.cmb_formato.setCurrentIndex(max(0, self.cmb_formato.findData(cfg.formato_data)))
        self._update_preview()

    def _update_preview(self) -> None:
        exemplo = format_date_br(now_iso(), self.cmb_formato.currentData(), self.cmb_fuso.currentData())
        self.lbl_preview.setText(f"Exemplo: {exemplo}")

    def save(self) -> Configuracoes:
        cfg = self.repo.update(
            nome_empresa=self.ed_empresa.text().strip(),
            horas_uteis_padrao=float(self.sp_horas.value()),
            fuso_horario=str(self.cmb_fuso.currentData()),
            formato_data=str(self.cmb_formato.currentData()),
        )
        if self.on_saved:
            self.on_saved(cfg)
        return cfg

    def _on_save_clicked(self) -> None:
        try:
            self.save()
        except ValueError as e:
            QMessageBox.warning(self, "Configurações", str(e))
            return
        QMessageBox.information(self, "Configurações", "Configurações salvas.")
