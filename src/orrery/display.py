'''Orrery display layer
Labels, colors and render groups for drawing a snapshot, and a 2D plotly
figure of the projected orbits. Nothing in the computation modules imports this.'''

import numpy as np
import plotly.graph_objects as go
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
from .config import config
from .ellipse import project_ellipse
from .planet import PlanetState
from .solar_system import Snapshot


@dataclass(frozen=True)
class DisplayStyle:
    """
    How one render entry is drawn.

    Attributes
    ----------
    label : str
        Text shown next to the planet marker
    inner : bool
        True for the inner system view, False for the outer view
    color : str
        Any CSS color understood by plotly
    """
    label: str
    inner: bool
    color: str


# Earth appears in both views, so it has two render ids
DISPLAY_STYLES: Dict[str, DisplayStyle] = {
    'mercury': DisplayStyle('Mercury', True, 'hsl(25, 100%, 30%)'),
    'venus': DisplayStyle('Venus', True, 'hsl(50, 100%, 30%)'),
    'earth_moon_inner': DisplayStyle('Earth', True, 'hsl(250, 60%, 30%)'),
    'earth_moon_outer': DisplayStyle('Earth', False, 'hsl(250, 60%, 30%)'),
    'mars': DisplayStyle('Mars', True, 'hsl(0, 100%, 30%)'),
    'jupiter': DisplayStyle('Jupiter', False, 'hsl(290, 100%, 30%)'),
    'saturn': DisplayStyle('Saturn', False, 'hsl(20, 100%, 30%)'),
    'uranus': DisplayStyle('Uranus', False, 'hsl(200, 75%, 30%)'),
    'neptune': DisplayStyle('Neptune', False, 'hsl(233, 75%, 30%)'),
}

# screen scale of each view [px per AU]
INNER_RATIO = 150
OUTER_RATIO = 8

GROUPS = ('inner', 'outer')

# space around the outermost orbit [AU] and around the plot area [px]
_PAD_AU = 0.1
_MARGIN_PX = dict(l=60, r=20, t=60, b=60)


def engine_id(render_id: str) -> str:
    """Planet identifier used by the computation for a render id"""
    if render_id.startswith('earth_moon'):
        return 'earth_moon'
    return render_id


def render_groups(snapshot: Snapshot
                  ) -> Dict[str, List[Tuple[str, DisplayStyle, PlanetState]]]:
    """
    Split a snapshot into the inner and outer views.

    Render ids whose planet is not in the snapshot are skipped.

    Returns
    -------
    dict
        {'inner': [...], 'outer': [...]} of (render_id, style, state)
    """
    groups = {group: [] for group in GROUPS}
    for render_id, style in DISPLAY_STYLES.items():
        planet = engine_id(render_id)
        if planet not in snapshot:
            continue
        group = 'inner' if style.inner else 'outer'
        groups[group].append((render_id, style, snapshot[planet]))
    return groups


def plot_snapshot(snapshot: Snapshot, group: str = 'inner',
                  n_points: Optional[int] = None) -> go.Figure:
    """
    Draw one view of a snapshot: orbit curves, planet markers and the Sun.

    The plot area is a square covering every drawn point, sized at
    INNER_RATIO or OUTER_RATIO px per AU for the chosen view.

    Parameters
    ----------
    snapshot : Snapshot
        Planet states to draw
    group : str, optional
        'inner' or 'outer' (default 'inner')
    n_points : int, optional
        Points per orbit curve (default: config.DEFAULT_PLOT_POINTS)

    Returns
    -------
    go.Figure
        Plotly figure in ecliptic (x, y) coordinates [AU]
    """
    if group not in GROUPS:
        raise ValueError(f"group must be one of {GROUPS}, got {group!r}")
    if n_points is None:
        n_points = config.DEFAULT_PLOT_POINTS

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=[0.0], y=[0.0],
        mode='markers',
        marker=dict(color='gold', size=10),
        name='Sun',
        hoverinfo='name'
    ))

    for render_id, style, state in render_groups(snapshot)[group]:
        orbit = state.orbit
        if orbit is None:
            orbit = project_ellipse(state.a, state.e, state.I,
                                    state.omega, state.Omega)
        curve = orbit.sample(n_points)
        fig.add_trace(go.Scatter(
            x=curve[:, 0],
            y=curve[:, 1],
            mode='lines',
            line=dict(color=style.color, width=1),
            name=f'{style.label} orbit',
            legendgroup=render_id,
            showlegend=False,
            hoverinfo='skip'
        ))
        x, y, _ = state.ecliptic_coordinate
        fig.add_trace(go.Scatter(
            x=[x], y=[y],
            mode='markers+text',
            marker=dict(color=style.color, size=6),
            text=[style.label],
            textposition='top center',
            name=style.label,
            legendgroup=render_id,
            hovertemplate=(f'{style.label}<br>x: %{{x:.4f}} AU<br>y: %{{y:.4f}} AU'
                           f'<br>hL: {state.heliocentric_longitude:.2f}°<extra></extra>')
        ))

    ratio = INNER_RATIO if group == 'inner' else OUTER_RATIO
    # half-width of the square view [AU], covering every drawn point
    extent = _PAD_AU
    for trace in fig.data:
        extent = max(extent, float(np.max(np.abs(trace.x))) + _PAD_AU,
                     float(np.max(np.abs(trace.y))) + _PAD_AU)
    plot_px = int(round(2*extent*ratio))
    fig.update_layout(
        title=f'{group.capitalize()} Solar System, T = {snapshot.T:+.6f} cy',
        xaxis=dict(title='X [AU]', zeroline=False,
                   range=[-extent, extent], constrain='domain'),
        yaxis=dict(title='Y [AU]', zeroline=False, range=[-extent, extent],
                   scaleanchor='x', scaleratio=1, constrain='domain'),
        width=plot_px + _MARGIN_PX['l'] + _MARGIN_PX['r'],
        height=plot_px + _MARGIN_PX['t'] + _MARGIN_PX['b'],
        margin=_MARGIN_PX,
        showlegend=False,
        meta=dict(px_per_au=ratio),
    )
    return fig
