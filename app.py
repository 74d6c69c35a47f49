import sys
from PySide6.QtWidgets import QApplication
from BackEnd.core.config import TimerConfig
from BackEnd.core.logging_setup import configure_logging
from BackEnd.repos.kv_store import KeyValueStore
from BackEnd.repos.session_repo import SessionStore
from BackEnd.services.session_recorder import SessionRecorder
from BackEnd.services.timer_service import PhaseTimer
from FrontEnd.ui_main import MainWindow

def main():
    logger = configure_logging()
    app = QApplication(sys.argv)
    config = TimerConfig.from_env()
    logger.info("Starting focus timer (study=%s min, break=%s min)", config.study_minutes, config.break_minutes)

    kv = KeyValueStore()
    store = SessionStore(kv)
    timer = PhaseTimer(config, SessionRecorder(store))
    win = MainWindow(timer, store)
    win.show()
    code = app.exec()
    kv.close()
    sys.exit(code)

if __name__ == "__main__":
    main()
