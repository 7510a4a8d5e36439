from PySide6.QtWidgets import QApplication
import sys

from atuapj_client.db.sqlite import init_db
from atuapj_client.ui.main_window import MainWindow
from atuapj_client.core.style import APP_QSS

def main():
    # Garante DB local de preferências
    init_db()

    app = QApplication(sys.argv)
    app.setStyleSheet(APP_QSS)
    w = MainWindow()
    w.resize(1100, 720)
    w.show()
    sys.exit(app.exec())

if __name__=="__main__":
    main()
