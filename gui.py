"""
Main file that controls GUI
"""
import os
import sys

from PyQt6.QtCore import QSize, Qt
from PyQt6.QtWidgets import (
    QApplication,
    QComboBox,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from bytepress.errors import CompressionError
from bytepress.huffman_stream import HuffmanCompressor
from bytepress.RLE import RLECompressor

ALGORITHMS = {
    "Huffman": HuffmanCompressor,
    "RLE": RLECompressor,
}

BUTTON_STYLE = """
    font-size: 15px;
    color: white;
    font-weight: 500;
    background-color: {color};
    border-radius: 10px;
"""

LABEL_STYLE = """
    font-size: {size}px;
    color: black;
    font-weight: {weight};
"""


def compressed_name(algorithm: str) -> str:
    return f"compressed_{algorithm.lower()}.bin"


def decompressed_name(algorithm: str) -> str:
    return f"decompressed_{algorithm.lower()}"


class MainWindow(QMainWindow):
    """
    class controls main window
    """

    def __init__(self):
        super().__init__()
        self.setFixedSize(QSize(800, 650))
        self.setWindowTitle("Compression Data Application")

        self.central_widget = QWidget()
        self.layout = QVBoxLayout()
        self.layout.setContentsMargins(40, 30, 40, 30)
        self.central_widget.setStyleSheet("background-color: #E8EEF2;")

        self.name = QLabel("Data compressor")
        self.name.setAlignment(Qt.AlignmentFlag.AlignLeft)
        self.name.setStyleSheet(
            """
            font-size: 35px;
            color: #0E103D;
            font-weight: 700;
        """
        )
        self.layout.addWidget(self.name)

        self.caption = QLabel("Choose file for compression:")
        self.caption.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.caption.setStyleSheet(LABEL_STYLE.format(size=25, weight=600))
        self.layout.addWidget(self.caption)

        self.pick_button = self._button("Pick a file", "#0E103D", QSize(400, 60), self.pick_file)

        self.selected_file = None
        self.selected_file_size = None
        self.file_label = QLabel("No file selected")
        self.file_label.setStyleSheet(LABEL_STYLE.format(size=15, weight=500))
        self.file_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.layout.addWidget(self.file_label)

        self.choose_alg = QLabel("Choose algorithm:")
        self.choose_alg.setStyleSheet(LABEL_STYLE.format(size=20, weight=600))
        self.layout.addWidget(self.choose_alg)

        self.algorithms_box = QComboBox()
        self.algorithms_box.addItems(list(ALGORITHMS.keys()))
        self.algorithms_box.setStyleSheet(
            """
            QComboBox {
                background-color: white;
                padding: 5px 10px;
                font-size: 15px;
                color: black;
                font-weight: 400;
                border-radius: 10px;
            }
        """
        )
        self.algorithms_box.setFixedSize(QSize(720, 40))
        self.layout.addWidget(self.algorithms_box)

        # codec of the last successful compression, None before that
        self.compressed_with = None
        self.compressed_size_label = QLabel("")
        self.compressed_size_label.setStyleSheet(LABEL_STYLE.format(size=15, weight=500))
        self.compressed_size_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.layout.addWidget(self.compressed_size_label)

        self.compress_button = self._button("Compress", "#0E103D", QSize(200, 60), self.compress_file)
        self.decompress_button = self._button(
            "Decompress", "#3590F3", QSize(200, 60), self.decompress_file
        )
        self.tree_button = self._button("Show Huffman tree", "#3590F3", QSize(200, 60), self.show_tree)

        self.central_widget.setLayout(self.layout)
        self.setCentralWidget(self.central_widget)

    def _button(self, text, color, size, handler):
        button = QPushButton(text)
        button.setStyleSheet(BUTTON_STYLE.format(color=color))
        button.setFixedSize(size)
        button.clicked.connect(handler)

        button_layout = QHBoxLayout()
        button_layout.addStretch()
        button_layout.addWidget(button)
        button_layout.addStretch()
        self.layout.addLayout(button_layout)
        return button

    def pick_file(self):
        """
        function handles picking files
        """
        dialog = QFileDialog()
        dialog.setFileMode(QFileDialog.FileMode.ExistingFile)
        if dialog.exec():
            files = dialog.selectedFiles()
            if len(files) > 1:
                QMessageBox.warning(
                    self,
                    "Too many files",
                    "Choose only one file at a time for compression.",
                )
                return

            self.selected_file = files[0]
            self.selected_file_size = os.stat(self.selected_file).st_size
            self.compressed_with = None
            self.file_label.setText(f"Selected: {os.path.basename(self.selected_file)}")

    def compress_file(self):
        """
        function handles file compression
        """
        if not self.selected_file:
            QMessageBox.warning(self, "Error", "No file to compress, select it first")
            return

        algorithm = self.algorithms_box.currentText()
        output = compressed_name(algorithm)
        try:
            log_info = ALGORITHMS[algorithm].compress_file(self.selected_file, output)
        except (CompressionError, OSError) as e:
            QMessageBox.warning(self, "Error", str(e))
            return

        self.compressed_with = algorithm
        compressed_size = os.stat(output).st_size
        self.compressed_size_label.setText(
            f"Original size was: {round(self.selected_file_size / 1024, 2)} KB, "
            f"now size is: {round(compressed_size / 1024, 2)} KB"
        )
        QMessageBox.information(self, "Success", f"File was compressed using {algorithm}!\n{log_info}")

    def decompress_file(self):
        """
        function handles file decompression
        """
        if self.compressed_with is None:
            QMessageBox.warning(self, "Error", "You have not compressed it yet!")
            return

        algorithm = self.compressed_with
        try:
            log_info = ALGORITHMS[algorithm].decompress_file(
                compressed_name(algorithm), decompressed_name(algorithm)
            )
        except (CompressionError, OSError) as e:
            QMessageBox.warning(self, "Error", str(e))
            return

        QMessageBox.information(self, "Success", f"File was decompressed using {algorithm}!\n{log_info}")

    def show_tree(self):
        """
        function draws the Huffman tree of the selected file
        """
        if not self.selected_file:
            QMessageBox.warning(self, "Error", "No file selected, select it first")
            return

        from bytepress.tree_view import show_tree

        with open(self.selected_file, "rb") as f:
            data = f.read()
        show_tree(HuffmanCompressor.tree_for(data), title=os.path.basename(self.selected_file))


if __name__ == "__main__":
    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    sys.exit(app.exec())
