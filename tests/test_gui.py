import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PyQt6.QtWidgets")

import gui

_app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])


@pytest.fixture
def window(monkeypatch, tmp_path):
    messages = []
    monkeypatch.setattr(gui.QMessageBox, "information", lambda *args: messages.append(args[1:]))
    monkeypatch.setattr(gui.QMessageBox, "warning", lambda *args: messages.append(args[1:]))
    monkeypatch.chdir(tmp_path)
    win = gui.MainWindow()
    win.messages = messages
    yield win
    win.close()


def select(win, path):
    win.selected_file = str(path)
    win.selected_file_size = path.stat().st_size


def test_decompress_uses_codec_of_last_compression(window, tmp_path):
    src = tmp_path / "data.txt"
    src.write_bytes(b"abracadabra" * 40)
    select(window, src)

    window.algorithms_box.setCurrentText("Huffman")
    window.compress_file()
    window.algorithms_box.setCurrentText("RLE")
    window.decompress_file()

    assert (tmp_path / "decompressed_huffman").read_bytes() == src.read_bytes()
    assert not (tmp_path / "decompressed_rle").exists()
    assert window.messages[-1][0] == "Success"


def test_decompress_before_compress_warns(window):
    window.decompress_file()
    assert window.messages == [("Error", "You have not compressed it yet!")]
