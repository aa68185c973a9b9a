# UI.py
""""PySide6 user interface for the Computor polynomial solver.

Structure
---------
- Solver UI: main window with equation input, button row and step display
- Settings UI: modal dialog for user preferences

Responsibilities (Solver)
-------------------------
- Build window, input line, buttons and the read-only output pane
- Dispatch the equation to MathEngine in a worker thread
- Render the steps / roots and show MathEngine errors as dialogs
- Clipboard integration (roots, or the whole report while Shift is held)
- Input history (Up / Down keys) and dark/light mode


Responsibilities (Settings)
---------------------------

- Load Current Settings and Settings Descriptions via Config_Manager
- Validate user input (e.g. minimum decimal places)
- Save and apply theme changes immediately


Threading Note
--------------
Solving runs off the UI thread in Worker(QObject); the result (or the error)
comes back through a Qt signal and is handled in the UI thread.
"""""

from PySide6 import QtWidgets, QtGui
from PySide6.QtCore import Qt, QObject, Signal
import sys
import threading
import pyperclip
from . import error as E  # Imports error.py as a module
from . import config_manager as config_manager  # Imports config_manager.py as a module
from . import MathEngine as MathEngine  # Imports MathEngine.py as a module


class Worker(QObject):
    """""

    Runs in a separate thread: hands the equation to MathEngine.py and emits a Signal
    with the Computation (or the error) back to the Solver UI.

    """""

    job_finished = Signal(object, str)

    def __init__(self, problem):
        super().__init__()
        self.data = problem

    def run_Calc(self):

        try:
            # --- 1. Start Calculation ---
            result = MathEngine.calculate(self.data)

            # --- 2. Send Success Signal ---
            self.job_finished.emit(result, self.data)

        except E.MathError as e:
            # --- 3. Send Math Error Signal ---
            # Known, handled error (e.g. "Not a polynomial")
            self.job_finished.emit(e, self.data)

        except Exception as e:
            # --- 4. Send Critical Error Signal ---
            # Unexpected crash, most likely a bug in the engine
            critical_error = E.MathError(
                message=f"Unexpected crash: {e!r}",
                code="9999",
                equation=self.data
            )
            self.job_finished.emit(critical_error, self.data)


class SettingsDialog(QtWidgets.QDialog):
    """""

    Manages the settings window, saves the new settings and opens an error
    message if something went wrong.

    Settings come in two kinds:
    1. Checkboxes   (True / False)
    2. Input Fields (integers, e.g. decimal_places)

    """""

    settings_saved = Signal()  # Tells the main window to reload

    def __init__(self, parent=None):
        super().__init__(parent)
        self.widgets = {}  # setting key -> widget

        # --- 1. Window Setup ---
        self.setWindowTitle("Solver Settings")
        self.setMinimumSize(320, 240)

        main_layout = QtWidgets.QVBoxLayout(self)

        # --- 2. Load Settings ---
        self.setting_value_list = config_manager.load_setting_value("all")
        self.setting_description_list = config_manager.load_setting_description("all")

        # --- 3. Build Widgets ---
        for key_value, value in self.setting_value_list.items():
            description = self.setting_description_list.get(key_value, key_value)

            # --- 3a. Checkbox Builder (for Boolean settings) ---
            if isinstance(value, bool):
                checkbox = QtWidgets.QCheckBox(description)
                checkbox.setChecked(value)
                main_layout.addWidget(checkbox)
                self.widgets[key_value] = checkbox

            # --- 3b. Input Field Builder (for Integer settings) ---
            elif isinstance(value, int):
                row_h_layout = QtWidgets.QHBoxLayout()
                main_layout.addLayout(row_h_layout)
                label = QtWidgets.QLabel(description + " (min. 2):")
                input_field = QtWidgets.QLineEdit()
                input_field.setPlaceholderText(str(value))  # Show current value as placeholder

                row_h_layout.addWidget(label)
                row_h_layout.addWidget(input_field)
                row_h_layout.setStretch(1, 1)
                self.widgets[key_value] = input_field

        # --- 4. OK / Cancel Buttons ---
        button_box = QtWidgets.QDialogButtonBox(QtWidgets.QDialogButtonBox.Ok | QtWidgets.QDialogButtonBox.Cancel)
        main_layout.addWidget(button_box)
        main_layout.addStretch(1)

        button_box.accepted.connect(self.save_settings)
        button_box.rejected.connect(self.reject)

        self.update_darkmode()

    def save_settings(self):
        setting_value_list = self.setting_value_list

        for key_value, widget in self.widgets.items():

            # --- 1. Handle Checkboxes ---
            if isinstance(widget, QtWidgets.QCheckBox):
                setting_value_list[key_value] = widget.isChecked()

            # --- 2. Handle Input Fields (like 'decimal_places') ---
            elif isinstance(widget, QtWidgets.QLineEdit):
                new_value_str = widget.text().strip()

                # If user left it blank, keep the old value
                if new_value_str == "":
                    continue

                try:
                    new_value_int = int(new_value_str)
                    if key_value == "decimal_places" and new_value_int < 2:
                        raise ValueError(f"'{new_value_int}' is too small. Minimum is 2.")
                    setting_value_list[key_value] = new_value_int

                except ValueError as e:
                    # Show an error box and STOP the save process
                    QtWidgets.QMessageBox.critical(self, "Invalid Input:",
                                                   f"Error in input for '{key_value}':\n\n{e}\n\nPlease correct your input.")
                    return

        # --- 3. Write to File ---
        saved_settings = config_manager.save_setting(setting_value_list)

        if saved_settings != {}:
            self.settings_saved.emit()
            self.accept()
        else:
            QtWidgets.QMessageBox.critical(self, "Error",
                                           f"Error 4501: {E.ERROR_MESSAGES['4501']}{config_manager.config_json}")

    def update_darkmode(self):
        if self.setting_value_list["darkmode"] == True:
            self.setStyleSheet("""
                        QDialog {background-color: #121212;}
                        QLabel {color: white;}
                        QCheckBox {color: white;}
                        QLineEdit {background-color: #444444;color: white;border: 1px solid #666666;}
                        QDialogButtonBox QPushButton {background-color: #666666;color: white;}""")
        else:
            self.setStyleSheet("")


class SolverWindow(QtWidgets.QWidget):
    shift_is_held = False

    def __init__(self):
        super().__init__()

        # --- 1. Load Settings ---
        self.setting_value_list = config_manager.load_setting_value("all")

        # --- 2. Instance State Variables ---
        self.last_computation = None  # Last successful Computation
        self.thread_active = False  # Is a calculation running?
        self.worker = None
        self.history = []  # Solved equations, newest last
        self.history_index = 0

        # --- 3. Window Setup ---
        self.button_objects = {}
        self.setWindowTitle("Computor")
        self.resize(560, 420)
        main_v_layout = QtWidgets.QVBoxLayout(self)

        # --- 4. Equation Input ---
        self.input = QtWidgets.QLineEdit()
        self.input.setPlaceholderText("5 * x^0 + 4 * x^1 - 9.3 * x^2 = 1 * x^0")
        font = self.input.font()
        font.setPointSize(16)
        self.input.setFont(font)
        self.input.returnPressed.connect(self.start_calculation)
        main_v_layout.addWidget(self.input)

        # --- 5. Button Row ---
        button_row = QtWidgets.QHBoxLayout()
        main_v_layout.addLayout(button_row)

        for text in ('⚙️', '📋', 'C', '⏎'):
            button = QtWidgets.QPushButton(text)
            button.clicked.connect(lambda checked=False, val=text: self.handle_button_press(val))
            button_row.addWidget(button)
            self.button_objects[text] = button

        # --- 6. Output Pane ---
        self.output = QtWidgets.QPlainTextEdit()
        self.output.setReadOnly(True)
        self.output.setFont(QtGui.QFontDatabase.systemFont(QtGui.QFontDatabase.FixedFont))
        main_v_layout.addWidget(self.output, 1)

        self.update_darkmode()

    # --- Key Event Handlers ---
    def update_button_labels(self):
        # Shift held -> the clipboard button copies the whole report instead of the roots
        copy_button = self.button_objects.get('📋')
        if copy_button:
            copy_button.setText('📑' if self.shift_is_held else '📋')

    def keyPressEvent(self, event):
        if event.key() == Qt.Key.Key_Shift:
            self.shift_is_held = True
            self.update_button_labels()
        elif event.key() == Qt.Key.Key_Up:
            self.browse_history(-1)
        elif event.key() == Qt.Key.Key_Down:
            self.browse_history(1)
        super().keyPressEvent(event)

    def keyReleaseEvent(self, event):
        if event.key() == Qt.Key.Key_Shift:
            self.shift_is_held = False
            self.update_button_labels()
        super().keyReleaseEvent(event)

    def browse_history(self, step):
        if not self.history:
            return
        self.history_index = max(0, min(len(self.history), self.history_index + step))
        if self.history_index == len(self.history):
            self.input.setText("")
        else:
            self.input.setText(self.history[self.history_index])

    def handle_button_press(self, value):
        if value == '⏎':
            self.start_calculation()

        elif value == 'C':
            self.input.setText("")
            self.output.setPlainText("")

        elif value == '📋':
            self.copy_to_clipboard(full_report=self.shift_is_held)

        elif value == '⚙️':
            self.open_settings()

    def copy_to_clipboard(self, full_report=False):
        if self.last_computation is None:
            return
        if full_report:
            pyperclip.copy("\n".join(self.last_computation.report()))
        else:
            pyperclip.copy("\n".join(self.last_computation.root_lines()))

    def start_calculation(self):
        problem = self.input.text().strip()
        if not problem:
            return
        if self.thread_active:
            self.show_error(E.MathError(E.ERROR_MESSAGES["4002"], code="4002", equation=problem))
            return

        self.history.append(problem)
        self.history_index = len(self.history)

        # --- Start Worker Thread ---
        self.thread_active = True
        self.update_return_button()
        self.output.setPlainText("...")

        self.worker = Worker(problem)
        self.worker.job_finished.connect(self.Calc_result)
        my_thread = threading.Thread(target=self.worker.run_Calc, daemon=True)
        my_thread.start()

    def update_return_button(self):
        return_button = self.button_objects.get('⏎')
        if not return_button:
            return

        # Red "X" while busy, blue "⏎" when idle
        if self.thread_active == True:
            return_button.setStyleSheet("background-color: #FF0000; color: white; font-weight: bold;")
            return_button.setText("X")
        else:
            return_button.setStyleSheet("background-color: #007bff; color: white; font-weight: bold;")
            return_button.setText("⏎")
        return_button.update()

    def update_darkmode(self):
        if self.setting_value_list["darkmode"] == True:
            for text, button in self.button_objects.items():
                if text != '⏎':
                    button.setStyleSheet("background-color: #121212; color: white; font-weight: bold;")
            self.setStyleSheet("background-color: #121212;")
            self.input.setStyleSheet("background-color: #121212; color: white; font-weight: bold;")
            self.output.setStyleSheet("background-color: #1e1e1e; color: white;")
        else:
            for text, button in self.button_objects.items():
                if text != '⏎':
                    button.setStyleSheet("font-weight: normal;")
            self.setStyleSheet("")
            self.input.setStyleSheet("font-weight: bold;")
            self.output.setStyleSheet("")
        self.update_return_button()

    def open_settings(self):
        settings_dialog = SettingsDialog(self)
        settings_dialog.exec()  # Modal

        # Reload so changes (darkmode, decimal places, ...) apply right away
        self.setting_value_list = config_manager.load_setting_value("all")
        self.update_darkmode()

    def get_message_box_stylesheet(self):
        if self.setting_value_list["darkmode"] == True:
            return """
                QMessageBox { background-color: #121212; color: white; }
                QLabel { color: white; }
                QPushButton {
                    background-color: #2e2e2e;
                    color: white;
                    border: 1px solid #444444;
                    padding: 5px 15px;
                }
                QPushButton:hover { background-color: #444444; }
            """
        return ""

    def show_error(self, error_obj):
        error_box = QtWidgets.QMessageBox(self)
        error_code = error_obj.code
        additional_info = f"Details: {error_obj.message}\nEquation: {error_obj.equation}"

        if isinstance(error_obj, E.ParseError):
            # Caret under the offending column
            additional_info += f"\n{' ' * (len('Equation: ') + error_obj.column - 1)}^"
            error_box.setFont(QtGui.QFontDatabase.systemFont(QtGui.QFontDatabase.FixedFont))

        error_box.setIcon(QtWidgets.QMessageBox.Critical)
        # First digit of the code is the error category
        error_box.setWindowTitle(E.Error_Dictionary.get(error_code[0], "Solver Error"))
        error_box.setText(f"Error {error_code}: {E.ERROR_MESSAGES.get(error_code, 'Unknown error')}")
        error_box.setInformativeText(additional_info)
        error_box.setStandardButtons(QtWidgets.QMessageBox.Ok)
        error_box.setStyleSheet(self.get_message_box_stylesheet())
        error_box.exec()

    def Calc_result(self, result, equation):
        self.thread_active = False
        self.update_return_button()

        if isinstance(result, E.MathError):
            # Keep whatever the pipeline got through before failing
            lines = list(result.steps)
            if isinstance(result, E.SolverError) and result.polynomial is not None:
                lines.append(f"Polynomial: {result.polynomial}")
                lines.append(f"Polynomial degree: {result.polynomial.degree}")
            self.output.setPlainText("\n".join(lines))
            self.show_error(result)
            return

        self.last_computation = result

        if self.setting_value_list["show_steps"] == True:
            lines = result.report()
        else:
            lines = [result.solution.message] + result.root_lines()
        self.output.setPlainText("\n".join(lines))

        if self.setting_value_list["copy_result"] == True:
            self.copy_to_clipboard()


def main():
    # --- Main Application Entry Point ---
    app = QtWidgets.QApplication(sys.argv)
    window = SolverWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
