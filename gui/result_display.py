from PyQt6.QtWidgets import QTextEdit


class ResultDisplay(QTextEdit):
    """Read-only area showing the feedback of the last command."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setReadOnly(True)
        self.setMaximumHeight(120)
        self.setObjectName("ResultDisplay")

    def set_feedback_to_user(self, feedback: str):
        self.setPlainText(feedback)
