from __future__ import annotations

from atuapj_client.core.theme import BASE

APP_QSS = f"""
QWidget {{
  background: {BASE['bg']};
  color: {BASE['text']};
  font-size: 13px;
}}

QLabel {{
  background: transparent;
}}

QLabel#Muted {{
  color: {BASE['muted']};
}}
QLabel#H0 {{
  font-size: 28px;
  font-weight: 700;
}}
QLabel#H1 {{
  font-size: 22px;
  font-weight: 700;
}}
QLabel#H2 {{
  font-size: 16px;
  font-weight: 600;
}}
QLabel#Caption {{
  font-size: 12px;
  color: rgba(154, 167, 193, 0.85);
}}
QLabel#Error {{
  color: {BASE['danger']};
}}

/* Cards/painéis */
QFrame#Card {{
  background-color: rgba(12, 18, 34, 0.55);
  border: 1px solid rgba(255,255,255,0.06);
  border-radius: 14px;
}}

/* Sidebar */
QFrame#Sidebar {{
  background: {BASE['panel']};
  border-right: 1px solid {BASE['border']};
}}

QPushButton#SidebarToggle {{
  padding: 6px 8px;
  border-radius: 12px;
  border: 1px solid rgba(255,255,255,0.10);
}}

QPushButton[role="nav"] {{
  text-align: left;
  padding: 10px 12px;
  border-radius: 10px;
  border: 1px solid transparent;
  background: transparent;
}}
QPushButton[role="nav"]:checked {{
  background: rgba(59, 130, 246, 0.14);
  border: 1px solid rgba(59, 130, 246, 0.35);
  border-left: 3px solid rgba(59, 130, 246, 0.95);
  padding-left: 10px;
}}

/* Botões padrão */
QPushButton {{
  padding: 8px 12px;
  border-radius: 10px;
  border: 1px solid {BASE['border']};
  background: {BASE['chip']};
}}
QPushButton:hover {{
  border: 1px solid rgba(59, 130, 246, 0.55);
}}
QPushButton:disabled {{
  color: {BASE['muted']};
}}

/* Chamada principal (ex.: "Acessar Login") */
QPushButton[role="primary"] {{
  padding: 12px 24px;
  font-size: 15px;
  font-weight: 600;
  border-radius: 10px;
  border: 1px solid transparent;
  background: {BASE['primary']};
  color: white;
}}
QPushButton[role="primary"]:hover {{
  background: {BASE['primary_hover']};
}}

/* Inputs */
QLineEdit, QComboBox, QDoubleSpinBox {{
  padding: 6px 10px;
  border-radius: 10px;
  border: 1px solid {BASE['border']};
  background: rgba(10, 16, 32, 0.65);
}}
QLineEdit:focus, QComboBox:focus, QDoubleSpinBox:focus {{
  border: 1px solid rgba(59, 130, 246, 0.75);
}}

/* Tabela */
QTableWidget {{
  border: 1px solid rgba(255,255,255,0.08);
  border-radius: 12px;
  background: rgba(10, 16, 32, 0.65);
  alternate-background-color: rgba(255,255,255,0.03);
}}
QHeaderView::section {{
  background: rgba(12, 18, 34, 0.55);
  color: rgba(234, 240, 255, 0.85);
  padding: 8px 10px;
  border: none;
}}
"""
