"""Smoke tests for the main window on the offscreen platform."""

from BackEnd.core.models import SessionRecord
from FrontEnd.ui_main import MainWindow


def test_window_reflects_state(timer, store):
    store.save([SessionRecord(date="2026-03-14", time="10:00:00", duration=20)])
    win = MainWindow(timer, store, confirm=lambda _msg: True)

    assert win.timer_label.text() == "1:00"
    assert win.status_label.text() == "Focus Time"
    assert win.start_btn.isEnabled()
    assert not win.pause_btn.isEnabled()
    assert win.history_list.topLevelItemCount() == 1
    assert win.history_list.topLevelItem(0).childCount() == 2

    win.start_btn.click()
    assert not win.start_btn.isEnabled()
    assert win.pause_btn.isEnabled()

    win.pause_btn.click()
    assert win.start_btn.isEnabled()
    win.close()


def test_window_delete_all(timer, store):
    store.save([SessionRecord(date="2026-03-14", time="10:00:00", duration=20)])
    win = MainWindow(timer, store, confirm=lambda _msg: True)

    win.delete_all_btn.click()
    assert len(store) == 0
    assert win.history_list.topLevelItemCount() == 0
    assert not win.delete_all_btn.isEnabled()
    win.close()


def test_window_delete_one_declined(timer, store):
    store.save([SessionRecord(date="2026-03-14", time="10:00:00", duration=20)])
    win = MainWindow(timer, store, confirm=lambda _msg: False)

    win.history_list.delete_requested.emit(0)
    assert len(store) == 1
    win.close()


def test_footer_shows_all_time_totals(timer, store):
    store.save([
        SessionRecord(date="2026-03-13", time="09:00:00", duration=30),
        SessionRecord(date="2026-03-14", time="10:00:00", duration=60),
    ])
    win = MainWindow(timer, store, confirm=lambda _msg: True)
    assert win.footer_today.totals_label.text() == "All time: 1.5 h over 2 days"
    win.close()


def test_today_total_follows_date_change_on_state_change(timer, store):
    store.save([SessionRecord(date="2026-03-14", time="10:00:00", duration=20)])
    win = MainWindow(timer, store, confirm=lambda _msg: True)
    win.presenter.today = lambda: "2026-03-13"
    win.start_btn.click()
    assert win.footer_today.label.text() == "Today: 0 mins"

    win.presenter.today = lambda: "2026-03-14"
    win.pause_btn.click()
    assert win.footer_today.label.text() == "Today: 20 mins"
    win.close()
