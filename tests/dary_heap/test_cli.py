import sys

import pytest

from src.dary_heap.cli import (
    HeapSession,
    format_heap,
    main,
    read_int,
)
from src.dary_heap.dary_heap import DAryHeap


@pytest.fixture
def replies(monkeypatch):
    """Feed scripted answers to ``input()``; EOFError once they run out."""
    answers = []

    def fake_input(prompt=""):
        print(prompt, end="")
        if not answers:
            raise EOFError
        return answers.pop(0)

    monkeypatch.setattr("builtins.input", fake_input)
    return answers


class TestReadInt:
    def test_valid_answer(self, replies):
        replies.extend(["3"])
        assert read_int("> ", 1, 5) == 3

    def test_retries_until_in_range(self, replies, capsys):
        replies.extend(["x", "0", "7", "-", " 4 "])
        assert read_int("> ", 1, 5) == 4

        out = capsys.readouterr().out
        assert out.count(
            "Invalid input. Please enter a number between 1 and 5."
        ) == 4

    def test_negative_numbers(self, replies):
        replies.extend(["-12"])
        assert read_int("> ", -100, 100) == -12

    def test_end_of_input(self, replies):
        with pytest.raises(EOFError):
            read_int("> ", 1, 5)


class TestHeapSession:

    @pytest.fixture
    def heap(self):
        return DAryHeap.max_heap([4, 1, 3, 2, 16, 9, 10, 14, 8, 7])

    def test_format_heap(self, heap):
        assert format_heap(heap) == "16 14 10 8 7 9 3 2 4 1"

    def test_session_runs_operations(self, heap, replies, capsys):
        replies.extend([
            "3",              # extract max
            "1", "100",       # insert 100
            "2", "0", "50",   # increase root to a smaller key
            "4", "0",         # delete the root
            "5",
        ])
        HeapSession(heap).run()

        out = capsys.readouterr().out
        assert "Your array with the d=2 is now heaped like this:" in out
        assert "16 14 10 8 7 9 3 2 4 1" in out
        assert "Extracted Max: 16" in out
        assert "Error: New key 50 is smaller than current key 100" in out
        assert out.rstrip().endswith("Exiting program.")

        assert sorted(heap.to_list()) == [1, 2, 3, 4, 7, 8, 9, 10, 14]
        assert heap.is_valid()

    def test_extract_from_empty_heap(self, replies, capsys):
        replies.extend(["3", "5"])
        HeapSession(DAryHeap(capacity=5)).run()
        assert "Heap is empty!" in capsys.readouterr().out

    def test_insert_into_full_heap(self, replies, capsys):
        heap = DAryHeap.max_heap([1, 2], capacity=2)
        replies.extend(["1", "3", "5"])
        HeapSession(heap).run()

        assert "Error: Heap overflow" in capsys.readouterr().out
        assert heap.to_list() == [2, 1]

    def test_delete_from_empty_heap(self, replies, capsys):
        replies.extend(["4", "0", "5"])
        HeapSession(DAryHeap(capacity=5)).run()
        assert "Error: Index 0 is out of range" in capsys.readouterr().out


class TestMain:

    @pytest.fixture
    def dataset_file(self, tmp_path):
        path = tmp_path / "heaps.txt"
        path.write_text("4 1 3 2 16 9 10 14 8 7\n5 3 8\n")
        return path

    def test_main_with_arguments(self, dataset_file, replies, capsys):
        replies.extend(["2", "3", "5"])
        status = main([str(dataset_file), "--degree", "3"])
        assert status == 0

        out = capsys.readouterr().out
        assert "array 1: 4 1 3 2 16 9 10 14 8 7" in out
        assert "array 2: 5 3 8" in out
        assert "Your array with the d=3 is now heaped like this:\n8 3 5" in out
        assert "Extracted Max: 8" in out

    def test_main_prompts_for_path_and_degree(
        self, dataset_file, replies, capsys
    ):
        replies.extend([str(dataset_file), "1", "0", "2", "5"])
        assert main([]) == 0

        out = capsys.readouterr().out
        assert "Invalid input." in out
        assert "16 14 10 8 7 9 3 2 4 1" in out

    def test_main_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.txt")]) == 1
        assert "Error" in capsys.readouterr().err

    def test_main_empty_file(self, tmp_path, capsys):
        path = tmp_path / "empty.txt"
        path.write_text("")
        assert main([str(path)]) == 1

    def test_main_end_of_input(self, dataset_file, replies, capsys):
        assert main([str(dataset_file)]) == 0
        assert "Exiting program." in capsys.readouterr().out

    def test_main_value_out_of_int64_range(self, tmp_path, capsys):
        path = tmp_path / "big.txt"
        path.write_text("1 99999999999999999999 3\n")
        assert main([str(path), "--degree", "2"]) == 1
        assert "does not fit in a signed 64-bit integer" in (
            capsys.readouterr().err
        )

    def test_main_non_utf8_file(self, tmp_path, capsys):
        path = tmp_path / "binary.txt"
        path.write_bytes(b"1 2 \xff\xfe 3\n")
        assert main([str(path), "--degree", "2"]) == 1
        assert "not valid UTF-8" in capsys.readouterr().err

    @pytest.mark.parametrize("degree", [sys.maxsize + 1, 0, -4])
    def test_main_prompts_for_degree_out_of_range(
        self, dataset_file, replies, capsys, degree
    ):
        replies.extend(["2", "3", "5"])
        assert main([str(dataset_file), "--degree", str(degree)]) == 0

        out = capsys.readouterr().out
        assert "Enter the degree (d) of the heap" in out
        assert "Your array with the d=3 is now heaped like this:\n8 3 5" in out
