import os
import threading
from unittest import mock

import pytest

from ttyutil.swrite import swrite


def _read_all(fd, sink):
    while True:
        chunk = os.read(fd, 65536)
        if not chunk:
            break
        sink.append(chunk)


def test_round_trip_bytes():
    r, w = os.pipe()
    try:
        assert swrite(w, b"hello, tty") == 10
        os.close(w)
        w = None
        assert os.read(r, 100) == b"hello, tty"
    finally:
        os.close(r)
        if w is not None:
            os.close(w)


def test_text_is_utf8():
    r, w = os.pipe()
    try:
        text = "caf\u00e9"
        count = swrite(w, text)
        assert count == len(text.encode("utf-8"))
        assert os.read(r, 100).decode("utf-8") == text
    finally:
        os.close(r)
        os.close(w)


def test_large_buffer_written_fully():
    payload = bytes(range(256)) * 2048
    r, w = os.pipe()
    chunks = []
    reader = threading.Thread(target=_read_all, args=(r, chunks))
    reader.start()
    try:
        assert swrite(w, payload) == len(payload)
    finally:
        os.close(w)
        reader.join()
        os.close(r)
    assert b"".join(chunks) == payload


def test_short_writes_are_retried():
    with mock.patch("os.write", side_effect=[3, 2, 1]) as fake:
        assert swrite(7, b"abcdef") == 6
    sent = [bytes(call.args[1]) for call in fake.call_args_list]
    assert sent == [b"abcdef", b"def", b"f"]


def test_no_progress_raises():
    with mock.patch("os.write", return_value=0):
        with pytest.raises(OSError):
            swrite(7, b"abc")


def test_bad_descriptor_raises():
    r, w = os.pipe()
    os.close(r)
    os.close(w)
    with pytest.raises(OSError):
        swrite(w, b"data")