from cpusched.gantt import MAX_GANTT_SIZE, GanttChart, GanttEntry


def test_empty_render():
    assert GanttChart().render() == "\ngantt chart\n0"


def test_render_contiguous():
    chart = GanttChart()
    chart.add(1, 0, 3)
    chart.add(2, 3, 5)
    assert chart.render() == "\ngantt chart\n0 ---P1--- 3 ---P2--- 5"


def test_render_idle_at_start_and_between():
    chart = GanttChart()
    chart.add(1, 2, 4)
    chart.add(3, 6, 9)
    assert chart.render() == (
        "\ngantt chart\n0 ---idle--- 2 ---P1--- 4 ---idle--- 6 ---P3--- 9"
    )


def test_add_respects_capacity():
    chart = GanttChart()
    for t in range(MAX_GANTT_SIZE + 5):
        chart.add(t, t, t + 1)
    assert len(chart) == MAX_GANTT_SIZE
    assert list(chart)[-1] == GanttEntry(MAX_GANTT_SIZE - 1, MAX_GANTT_SIZE - 1, MAX_GANTT_SIZE)


def test_extend_or_add_merges_same_pid():
    chart = GanttChart()
    chart.extend_or_add(4, 0, 1)
    chart.extend_or_add(4, 1, 2)
    chart.extend_or_add(5, 2, 3)
    assert list(chart) == [GanttEntry(4, 0, 2), GanttEntry(5, 2, 3)]


def test_extend_or_add_on_empty_adds():
    chart = GanttChart()
    chart.extend_or_add(1, 3, 4)
    assert list(chart) == [GanttEntry(1, 3, 4)]


def test_extend_when_full_still_stretches_last():
    chart = GanttChart(capacity=1)
    chart.add(1, 0, 1)
    chart.extend_or_add(1, 1, 5)
    chart.extend_or_add(2, 5, 6)
    assert list(chart) == [GanttEntry(1, 0, 5)]