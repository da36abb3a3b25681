"""
PyQt5 GUI interface for Returnfix.

This module provides the host window for the extra returns remover: load or
paste text, pick options, remove extra returns from the whole text or the
selection, and save the result.
"""

import sys
import os
from pathlib import Path

try:
    from PyQt5.QtWidgets import (
        QApplication, QMainWindow, QVBoxLayout, QHBoxLayout, QWidget,
        QPushButton, QTextEdit, QLabel, QCheckBox, QLineEdit,
        QFileDialog, QMessageBox, QGroupBox, QGridLayout, QSpinBox
    )
    from PyQt5.QtGui import QFont, QTextCursor
except ImportError:
    print("PyQt5 not installed. Please install with: pip install PyQt5")
    sys.exit(1)

from .context import ReturnfixSession, ProcessingOptions
from .logging import log_message
from .datafile import load_data_file
from .pipeline import run_processing
from .reporter import RandomizedResultReporter
from .processors.listmarkers import inert_list_markers


def format_marker_list(markers) -> str:
    """Shows the raw markers as one comma-separated line, tabs as \\t."""
    return ",".join(marker.replace("\t", "\\t") for marker in markers)


def parse_marker_list(text: str):
    """Reverses format_marker_list; an empty field means no list markers."""
    if not text:
        return ()
    return tuple(marker.replace("\\t", "\t") for marker in text.split(","))


class ReturnfixMainWindow(QMainWindow):
    """Main application window for Returnfix."""

    def __init__(self):
        super().__init__()
        self.ctx = ReturnfixSession()
        self.reporter = RandomizedResultReporter()

        self.init_ui()
        self.load_configuration()

    def init_ui(self):
        """Initialize the user interface."""
        self.setWindowTitle("Returnfix - Extra Returns Remover")
        self.setGeometry(100, 100, 1000, 750)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QVBoxLayout()
        central_widget.setLayout(main_layout)

        main_layout.addWidget(self.create_file_section())
        main_layout.addWidget(self.create_options_section())
        main_layout.addWidget(self.create_text_section(), 1)
        main_layout.addWidget(self.create_status_section())
        main_layout.addWidget(self.create_button_section())

    def create_file_section(self) -> QGroupBox:
        """Create the file selection section."""
        group = QGroupBox("File Selection")
        layout = QHBoxLayout()

        self.file_label = QLabel("No file selected")
        self.file_label.setStyleSheet("font-weight: bold;")

        self.browse_button = QPushButton("Browse...")
        self.browse_button.clicked.connect(self.browse_file)

        layout.addWidget(QLabel("File:"))
        layout.addWidget(self.file_label, 1)
        layout.addWidget(self.browse_button)

        group.setLayout(layout)
        return group

    def create_options_section(self) -> QGroupBox:
        """Create the processing options section."""
        group = QGroupBox("Processing Options")
        layout = QGridLayout()

        self.markers_edit = QLineEdit()
        self.markers_edit.setToolTip(
            "Comma-separated list markers. Use [outline] before a delimiter for "
            "numbered or lettered lists, e.g. [outline]) or [outline]. ; \\t is a tab.")

        self.min_length_spin = QSpinBox()
        self.min_length_spin.setRange(0, 10000)
        self.min_length_spin.setToolTip("Lines shorter than this keep their hard return")

        self.email_markers_checkbox = QCheckBox("Mark start and end of quoted replies")
        self.selection_checkbox = QCheckBox("Only process the selected text")

        layout.addWidget(QLabel("List markers:"), 0, 0)
        layout.addWidget(self.markers_edit, 0, 1, 1, 3)
        layout.addWidget(QLabel("Minimum line length:"), 1, 0)
        layout.addWidget(self.min_length_spin, 1, 1)
        layout.addWidget(self.email_markers_checkbox, 2, 0, 1, 2)
        layout.addWidget(self.selection_checkbox, 2, 2, 1, 2)

        group.setLayout(layout)
        return group

    def create_text_section(self) -> QWidget:
        """Create the text editing section."""
        widget = QWidget()
        layout = QVBoxLayout()

        layout.addWidget(QLabel("Text Content:"))

        self.text_edit = QTextEdit()
        self.text_edit.setAcceptRichText(False)
        self.text_edit.setFont(QFont("Courier New", 10))
        layout.addWidget(self.text_edit)

        widget.setLayout(layout)
        return widget

    def create_status_section(self) -> QWidget:
        """Create the status section."""
        widget = QWidget()
        layout = QVBoxLayout()

        self.status_label = QLabel("Ready")
        layout.addWidget(self.status_label)

        widget.setLayout(layout)
        return widget

    def create_button_section(self) -> QWidget:
        """Create the action buttons section."""
        widget = QWidget()
        layout = QHBoxLayout()

        self.start_button = QPushButton("Remove Extra Returns")
        self.start_button.clicked.connect(self.start_processing)
        self.start_button.setStyleSheet("font-weight: bold; padding: 8px 16px;")

        self.save_button = QPushButton("Save Output")
        self.save_button.clicked.connect(self.save_output)

        self.quit_button = QPushButton("Quit")
        self.quit_button.clicked.connect(self.close)

        layout.addWidget(self.start_button)
        layout.addStretch()
        layout.addWidget(self.save_button)
        layout.addWidget(self.quit_button)

        widget.setLayout(layout)
        return widget

    def load_configuration(self):
        """Load default options from .data.txt file."""
        try:
            self.ctx = load_data_file(self.ctx)
            log_message("Configuration loaded successfully")
        except Exception as e:
            log_message(f"Error loading configuration: {e}", level="ERROR")
            QMessageBox.warning(self, "Configuration Error",
                                f"Could not load configuration: {e}")
        self.show_options(self.ctx.options)

    def show_options(self, options: ProcessingOptions):
        """Put an options value into the option widgets."""
        self.markers_edit.setText(format_marker_list(options.list_markers))
        self.min_length_spin.setValue(options.min_line_length)
        self.email_markers_checkbox.setChecked(options.email_markers_enabled)
        self.selection_checkbox.setChecked(options.restrict_to_region)

    def get_options(self) -> ProcessingOptions:
        """Snapshot the option widgets into an immutable options value."""
        list_markers = parse_marker_list(self.markers_edit.text())
        for marker in inert_list_markers(list_markers):
            log_message(f"List marker {marker!r} has no literal and will never match", level="WARNING")
        return ProcessingOptions(
            list_markers=list_markers,
            min_line_length=self.min_length_spin.value(),
            email_markers_enabled=self.email_markers_checkbox.isChecked(),
            restrict_to_region=self.selection_checkbox.isChecked(),
        )

    def browse_file(self):
        """Handle file browser dialog."""
        initial_dir = str(self.ctx.default_file_directory) if self.ctx.default_file_directory else str(Path.home())

        file_path, _ = QFileDialog.getOpenFileName(
            self,
            "Select file to process",
            initial_dir,
            "Text files (*.txt *.eml);;All files (*.*)"
        )

        if file_path:
            self.load_file(file_path)

    def load_file(self, file_path: str):
        """Load a file into the editor."""
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            error_msg = f"Error loading file: {e}"
            log_message(error_msg, level="ERROR")
            QMessageBox.critical(self, "File Error", error_msg)
            return

        self.ctx.filepath = file_path
        self.file_label.setText(os.path.basename(file_path))
        self.file_label.setToolTip(file_path)
        self.text_edit.setPlainText(content)
        self.update_status(f"Loaded file: {os.path.basename(file_path)}")

        log_message(f"File loaded: {file_path}")

    def start_processing(self):
        """Remove extra returns from the editor's text or selection."""
        text = self.text_edit.toPlainText()
        if not text:
            QMessageBox.warning(self, "No Text", "Load a file or paste some text first.")
            return

        cursor = self.text_edit.textCursor()
        self.ctx.text = text
        self.ctx.selection_start = cursor.selectionStart()
        self.ctx.selection_end = cursor.selectionEnd()
        self.ctx.options = self.get_options()

        try:
            result = run_processing(self.ctx, self.ctx.options, status_callback=self.update_status)
        except Exception as e:
            error_msg = f"Processing error: {e}"
            log_message(error_msg, level="ERROR")
            QMessageBox.critical(self, "Processing Error", error_msg)
            return

        # Replace the whole document in one edit so undo restores it
        edit_cursor = QTextCursor(self.text_edit.document())
        edit_cursor.select(QTextCursor.Document)
        edit_cursor.insertText(result.text)

        self.update_status(self.reporter.summarize(result.returns_removed))
        log_message(self.ctx.get_processing_summary())

    def update_status(self, status: str):
        """Update the status label."""
        self.status_label.setText(status)

    def save_output(self):
        """Save the edited text to a file."""
        text = self.text_edit.toPlainText()
        if not text:
            QMessageBox.warning(self, "No Content", "No processed content to save.")
            return

        if self.ctx.filepath:
            base_name = os.path.splitext(os.path.basename(self.ctx.filepath))[0]
            default_name = f"{base_name}_output.txt"
        else:
            default_name = "returnfix_output.txt"

        file_path, _ = QFileDialog.getSaveFileName(
            self,
            "Save processed text",
            default_name,
            "Text files (*.txt);;All files (*.*)"
        )

        if file_path:
            try:
                with open(file_path, 'w', encoding='utf-8') as f:
                    f.write(text)

                QMessageBox.information(self, "File Saved", f"Output saved to:\n{file_path}")
                log_message(f"Output saved to: {file_path}")

            except OSError as e:
                error_msg = f"Error saving file: {e}"
                log_message(error_msg, level="ERROR")
                QMessageBox.critical(self, "Save Error", error_msg)

    def closeEvent(self, event):
        """Handle application close event."""
        log_message("Application closing")
        event.accept()


def main():
    """Main application entry point."""
    app = QApplication(sys.argv)
    app.setApplicationName("Returnfix")
    app.setOrganizationName("Returnfix")

    window = ReturnfixMainWindow()
    window.show()

    log_message("Returnfix PyQt5 application started")

    sys.exit(app.exec_())


if __name__ == '__main__':
    main()
