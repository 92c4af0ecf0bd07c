from iats.data_state import DataState


def test_initial_state():
    ds = DataState()
    assert ds.has_value() is False
    assert ds.is_dirty() is False
    assert ds.ack_at_seq == -1
    assert ds.ack_received is False


def test_update_changed_marks_dirty():
    ds = DataState()
    ds.update(True, 100)
    assert ds.is_dirty()
    assert ds.dirty_since == 100
    assert ds.has_value()
    ds.update(True, 200)
    assert ds.dirty_since == 100
    assert ds.last_update == 200


def test_update_unchanged_not_dirty():
    ds = DataState()
    ds.update(False, 100)
    assert ds.is_dirty() is False
    assert ds.has_value()


def test_score_not_dirty_is_time_since_sent():
    ds = DataState()
    ds.sent(-1, 1000)
    assert ds.score(1500) == 500


def test_dirty_score_grows_faster():
    clean = DataState()
    clean.sent(-1, 0)
    dirty = DataState()
    dirty.sent(-1, 0)
    dirty.update(True, 10)
    assert dirty.score(110) == 100 * 50 + 110
    assert dirty.score(110) > clean.score(110)


def test_sent_clears_dirty():
    ds = DataState()
    ds.update(True, 5)
    ds.sent(3, 10)
    assert ds.is_dirty() is False
    assert ds.ack_at_seq == 3
    assert ds.last_sent == 10


def test_ack_received_matching_seq():
    ds = DataState()
    ds.sent(7, 10)
    ds.update_ack_received(6)
    assert ds.ack_received is False
    ds.update_ack_received(7)
    assert ds.ack_received is True
    assert ds.ack_at_seq == -1


def test_ack_ignored_when_not_waiting():
    ds = DataState()
    ds.sent(-1, 10)
    ds.update_ack_received(-1)
    assert ds.ack_received is False


def test_change_resets_ack():
    ds = DataState()
    ds.sent(2, 10)
    ds.update_ack_received(2)
    ds.update(True, 20)
    assert ds.ack_received is False
    assert ds.ack_at_seq == -1


def test_stop_and_reset_ack():
    ds = DataState()
    ds.sent(4, 10)
    ds.update_ack_received(4)
    ds.sent(5, 20)
    ds.stop_ack()
    assert ds.ack_at_seq == -1
    assert ds.ack_received is True
    ds.reset_ack()
    assert ds.ack_received is False