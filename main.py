"""Entry point — glues pystray (daemon thread) with tkinter (main thread)."""

import ctypes
import logging
import threading

from icon_gen import create_icon_image
from picker_window import PickerWindow
from settings import load_settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=settings["log_level"].upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # DPI awareness so fonts are crisp on Hi-DPI monitors (Windows only)
    try:
        ctypes.windll.shcore.SetProcessDpiAwareness(1)
    except (AttributeError, OSError):
        logger.debug("DPI awareness not available on this platform")

    win = PickerWindow(settings=settings)

    if settings["tray_icon"]:
        from tray_icon import create_tray

        # Callbacks marshalled onto the tkinter main thread
        def on_show() -> None:
            win.root.after(0, win.toggle)

        def on_exit() -> None:
            def _quit() -> None:
                tray.stop()
                win.root.destroy()
            win.root.after(0, _quit)

        tray = create_tray(create_icon_image(), on_show, on_exit)
        # Run pystray in a daemon thread so it doesn't block tkinter
        threading.Thread(target=tray.run, daemon=True).start()
    else:
        win.root.protocol("WM_DELETE_WINDOW", win.root.destroy)

    win.root.mainloop()


if __name__ == "__main__":
    main()
