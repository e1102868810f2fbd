"""
Tests for the interactive console menu.

The menu takes input/output callables, so a test scripts the keystrokes
as a list and collects everything the menu printed.
"""

from cli.main import SpoolerMenu


def _run(engine, *keys: str) -> str:
    """Feed `keys` to the menu one prompt at a time, return all output."""
    answers = iter(keys)
    printed: list[str] = []

    def fake_input(prompt: str) -> str:
        try:
            return next(answers)
        except StopIteration:
            raise EOFError

    SpoolerMenu(engine, input_fn=fake_input, output_fn=printed.append).run()
    return "\n".join(printed)


def test_exit_immediately(engine):
    output = _run(engine, "7")
    assert "Print Job Spooler Simulation" in output
    assert output.endswith("Exiting simulation. Goodbye!")


def test_end_of_input_exits_cleanly(engine):
    output = _run(engine)
    assert output.endswith("Exiting simulation. Goodbye!")


def test_add_job(engine):
    output = _run(engine, "1", "10", "2", "7")

    assert "Success: Added Job 1 (10 pages, priority 2)." in output
    assert [(j.size, j.priority) for j in engine.list_jobs()] == [(10, 2)]


def test_add_invalid_job(engine):
    output = _run(engine, "1", "0", "2", "7")

    assert "Error: Page count and priority must be positive" in output
    assert engine.list_jobs() == []


def test_add_job_non_numeric(engine):
    output = _run(engine, "1", "many", "7")

    assert "Invalid input. Please enter a number." in output
    assert engine.list_jobs() == []


def test_add_job_when_full_skips_prompts(engine):
    """A full queue is reported before asking for page count or priority."""
    for _ in range(engine.repository.capacity):
        engine.submit_job(1, 1)

    answers = iter(["1", "7"])
    prompts: list[str] = []
    printed: list[str] = []

    def fake_input(prompt: str) -> str:
        prompts.append(prompt)
        return next(answers)

    SpoolerMenu(engine, input_fn=fake_input, output_fn=printed.append).run()

    assert prompts == ["Enter your choice: ", "Enter your choice: "]
    assert f"Error: Print queue is full ({engine.repository.capacity} jobs). Cannot add more jobs." in printed
    assert printed[-1] == "Exiting simulation. Goodbye!"


def test_non_numeric_choice(engine):
    output = _run(engine, "abc", "7")
    assert "Invalid input. Please enter a number." in output


def test_unknown_choice(engine):
    output = _run(engine, "42", "7")
    assert "Invalid choice. Please try again." in output


def test_display_empty_queue(engine):
    output = _run(engine, "2", "7")
    assert "The print queue is currently empty." in output


def test_display_queue(seeded_engine):
    output = _run(seeded_engine, "2", "7")

    assert "--- Current Print Queue (FCFS Order) ---" in output
    assert "2      | 5          | 1       " in output


def test_run_on_empty_queue(engine):
    output = _run(engine, "3", "4", "5", "7")
    assert output.count("Cannot run simulation: The print queue is empty.") == 3


def test_run_fcfs(seeded_engine):
    output = _run(seeded_engine, "3", "7")

    assert "--- Simulation Results: First-Come, First-Served (FCFS) ---" in output
    assert "Average Waiting Time:     8.33" in output
    assert "Average Turnaround Time:  20.00" in output


def test_run_sjf(seeded_engine):
    output = _run(seeded_engine, "4", "7")

    assert "--- Simulation Results: Shortest Job First (SJF) ---" in output
    assert "Average Waiting Time:     6.67" in output
    assert "Average Turnaround Time:  18.33" in output


def test_run_priority(seeded_engine):
    output = _run(seeded_engine, "5", "7")

    assert "--- Simulation Results: Priority Scheduling ---" in output
    assert "Average Waiting Time:     6.67" in output


def test_compare(seeded_engine):
    output = _run(seeded_engine, "6", "7")

    assert "--- Policy Comparison ---" in output
    assert "Shortest Job First (SJF)" in output


def test_eof_mid_add_exits(engine):
    output = _run(engine, "1", "10")
    assert output.endswith("Exiting simulation. Goodbye!")
    assert engine.list_jobs() == []
