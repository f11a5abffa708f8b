from typing import Any

from paramsched.schedule import Schedule, ScheduleIterator


def _get_history(schedule: Schedule, num_steps: int) -> list[Any]:
    iterator = ScheduleIterator(schedule)
    return [iterator.next() for _ in range(num_steps)]


def visualize_schedule(
        schedule: Schedule,
        num_steps: int,
        title: str = "Schedule",
        xaxis_title: str = "Iteration",
        yaxis_title: str = "Value"
):
    """
    Visualizes a schedule using Plotly.

    This function evaluates the first `num_steps` iterations of the schedule and
    generates an interactive plot.

    Args:
        schedule: The schedule to plot.
        num_steps: The number of iterations to evaluate.
        title: The title of the figure and the name of the plotted trace.
        xaxis_title: The label of the iteration axis.
        yaxis_title: The label of the value axis, e.g. the name of the scheduled hyperparameter.

    Raises:
        ImportError: If the `plotly` library is not installed.
    """

    try:
        import plotly.graph_objects as go  # noqa: PLC0415
    except ImportError as e:
        raise ImportError("You have to install `plotly` dependency to use schedule visualization") from e
    values = _get_history(schedule, num_steps)
    steps = list(range(1, num_steps + 1))

    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=steps,
        y=values,
        mode="lines",
        name=title,
        line={"color": "#636EFA", "width": 3},
        hovertemplate="<b>Step:</b> %{x}<br><b>%{fullData.name}:</b> %{y:.6f}<extra></extra>"
    ))

    fig.update_layout(
        title={
            "text": title,
            "y": 0.95,
            "x": 0.5,
            "xanchor": "center",
            "yanchor": "top"
        },
        xaxis_title=xaxis_title,
        yaxis_title=yaxis_title,
        template="plotly_white",
        hovermode="x unified",
        height=500
    )

    fig.show()
