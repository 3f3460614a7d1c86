import sys
from PyQt5.QtWidgets import QApplication
from capcalc.services.settings import SettingsManager
from capcalc.services.traceback_dialog import install_excepthook
from capcalc.ui.main_window import MainWindow


def run():
    install_excepthook()
    app = QApplication(sys.argv)
    settings = SettingsManager()
    win = MainWindow(settings)
    win.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    run()
