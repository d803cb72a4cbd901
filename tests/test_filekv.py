import threading

from dockman.util.filekv import FileLocker, read_key_values, write_key_value


def test_read_missing_file_creates_it(tmp_path):
    path = tmp_path / "nested" / "store.kv"
    assert read_key_values(path) == {}
    assert path.exists()
    assert path.read_text() == ""


def test_read_skips_comments_and_invalid_lines(tmp_path):
    path = tmp_path / "store.kv"
    path.write_text("# comment\n\n  name = dockman \nno separator\nurl=a=b\n")
    assert read_key_values(path) == {"name": "dockman", "url": "a=b"}


def test_write_then_read_round_trip(tmp_path):
    path = tmp_path / "store.kv"
    locker = FileLocker()
    write_key_value(path, "alpha", "1", locker)
    write_key_value(path, "beta", "2", locker)
    assert read_key_values(path) == {"alpha": "1", "beta": "2"}
    assert not (tmp_path / "store.kv.tmp").exists()


def test_write_updates_existing_key(tmp_path):
    path = tmp_path / "store.kv"
    locker = FileLocker()
    write_key_value(path, "alpha", "1", locker)
    write_key_value(path, "alpha", "changed", locker)
    assert read_key_values(path) == {"alpha": "changed"}


def test_concurrent_writes_keep_every_key(tmp_path):
    path = tmp_path / "store.kv"
    locker = FileLocker()
    threads = [
        threading.Thread(target=write_key_value, args=(path, f"k{i}", str(i), locker))
        for i in range(10)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert read_key_values(path) == {f"k{i}": str(i) for i in range(10)}