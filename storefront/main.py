"""
Storefront application runner.
Run with: storefront (or: streamlit run storefront/app.py)
"""
import subprocess
import sys
from pathlib import Path

APP_PATH = Path(__file__).resolve().parent / "app.py"


def main():
    """Run the Streamlit storefront application"""
    try:
        subprocess.run(["streamlit", "run", str(APP_PATH)], check=True)
    except KeyboardInterrupt:
        print("\nApplication stopped.")
    except FileNotFoundError:
        print("Error: Streamlit not found. Please install dependencies:")
        print("  pip install -e .")
        sys.exit(1)
    except subprocess.CalledProcessError as e:
        print(f"Error running application: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
