# Main.py
""""" Entry point for the Computor polynomial solver.

   Responsibilities:
   - Detect run mode (script vs PyInstaller.exe)
   - Verify required files exist in development mode
   - CLI mode (equation given as argument): print every step and the roots
   - GUI mode (no argument): load configuration and start the Qt window

"""""
import sys
from pathlib import Path
from computor import config_manager as config_manager, MathEngine as MathEngine, error as E


# Resolve project root depending on run mode (Script or .exe)

if getattr(sys, 'frozen', False):
    PROJECT_ROOT = Path(sys._MEIPASS)
else:
    PROJECT_ROOT = Path(__file__).resolve().parent



def check_files_exist():

    """
      Fail fast in development if required files are missing / moved / renamed.
      In production (.exe) the files are embedded by the bundler, so this check is skipped.
    """

    modules_dir = PROJECT_ROOT / "computor"

    REQUIRED = [
        modules_dir / "UI.py",
        modules_dir / "MathEngine.py",
        modules_dir / "Expression.py",
        modules_dir / "Parser.py",
        modules_dir / "Polynomial.py",
        modules_dir / "Solver.py",
        modules_dir / "config_manager.py",
        modules_dir / "error.py",
        PROJECT_ROOT / "config.json",
        PROJECT_ROOT / "ui_strings.json",
    ]

    missing_files = []
    for file_path in REQUIRED:
        if not file_path.exists():
            missing_files.append(file_path.name)

    if missing_files:
        print("Error 1000: " + E.ERROR_MESSAGES["1000"])
        for file_name in missing_files:
            print(f"- {file_name}")
        sys.exit(1)


def run_cli(equation):
    """Solve one equation and print the report. Returns the process exit code."""
    print(f">>> {equation}")

    try:
        computation = MathEngine.calculate(equation)

    except E.ParseError as e:
        # Caret under the offending column (">>> " is 4 characters wide)
        print("    " + " " * (e.column - 1) + "^")
        print(f"Error {e.code}: {e.message}")
        return 1

    except E.PolynomialError as e:
        for line in e.steps:
            print(line)
        print("Not a polynomial!")
        return 1

    except E.SolverError as e:
        for line in e.steps:
            print(line)
        if e.polynomial is not None:
            print(f"Polynomial: {e.polynomial}")
            print(f"Polynomial degree: {e.polynomial.degree}")
        print("I can't solve that!")
        return 1

    except E.MathError as e:
        print(f"Error {e.code}: {e.message}")
        return 1

    for line in computation.report():
        print(line)
    return 0


def main():

    """
    CLI mode when an equation is passed, otherwise start the GUI.
    - Keep this thin: no business logic here.
    """

    if len(sys.argv) > 1:
        sys.exit(run_cli(" ".join(sys.argv[1:])))

    all_settings = config_manager.load_setting_value("all")
    print("Config loaded:", all_settings)

    # Imported here so the CLI works without a display
    from computor import UI as UI
    UI.main()


if __name__ == "__main__":
    is_running_as_exe = getattr(sys, 'frozen', False)

    if not is_running_as_exe:
        check_files_exist()
    main()
