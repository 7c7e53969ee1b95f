"""Allow running Pomodoro as a module: python -m pomodoro."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from .app import PomodoroApp


def main() -> None:
    logging.basicConfig(
        level=logging.DEBUG if "--debug" in sys.argv else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)
    app.setApplicationName("Pomodoro")
    app.setOrganizationName("Pomodoro")

    window = PomodoroApp()
    window.show()
    logging.getLogger("pomodoro").info("Pomodoro ready")

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
