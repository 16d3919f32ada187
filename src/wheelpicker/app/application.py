from PySide6.QtCore import QCoreApplication

import sys

ORG_ID = "wheelpicker"
APP_ID = "wheel-picker"

VISIBLE_APP_NAME = "Wheel Picker"


def create_app() -> QCoreApplication:
    """Create (or reuse) the QCoreApplication instance."""
    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication(sys.argv)

    return app
