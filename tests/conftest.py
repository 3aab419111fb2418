# Qt widgets in these tests run headless; pytest-qt supplies the qtbot / qapp fixtures.

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
