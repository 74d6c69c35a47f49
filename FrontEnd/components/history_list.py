from PySide6.QtCore import Signal
from PySide6.QtWidgets import QPushButton, QTreeWidget, QTreeWidgetItem


class HistoryList(QTreeWidget):
    """Expandable session list; each top-level row has its own delete button."""
    delete_requested = Signal(int)  # stored history index

    def __init__(self):
        super().__init__()
        self.setColumnCount(2)
        self.setHeaderHidden(True)
        self.setRootIsDecorated(True)

    def set_rows(self, rows):
        self.clear()
        for row in rows:
            item = QTreeWidgetItem([row.summary, ""])
            for line in row.detail.splitlines():
                item.addChild(QTreeWidgetItem([line, ""]))
            self.addTopLevelItem(item)
            btn = QPushButton("Delete")
            btn.setObjectName("DeleteEntryBtn")
            btn.setToolTip("Delete entry")
            btn.clicked.connect(lambda _checked=False, i=row.index: self.delete_requested.emit(i))
            self.setItemWidget(item, 1, btn)
        self.resizeColumnToContents(0)
