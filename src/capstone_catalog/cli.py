from capstone_catalog.backend.app.runner import run as api_run
from capstone_catalog.frontend.streamlit_app.runner import run as ui_run
from capstone_catalog.shared.proc import terminate_tree


def main():
    api_proc = api_run()
    ui_proc = ui_run()
    try:
        # Wait until UI exits (or Ctrl+C in this terminal)
        ui_proc.wait()
    except KeyboardInterrupt:
        print("\nCtrl+C received, shutting down...")
    finally:
        for proc in (ui_proc, api_proc):
            terminate_tree(proc)


if __name__ == "__main__":
    main()
