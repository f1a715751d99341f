import os
from typing import Dict, List, Tuple

import matplotlib.pyplot as plt
import matplotlib.colors as mcolors


PALETTE = [
    "#1f77b4",
    "#ff7f0e",
    "#2ca02c",
    "#d62728",
    "#9467bd",
    "#8c564b",
    "#e377c2",
    "#7f7f7f",
    "#bcbd22",
    "#17becf",
]


def _ensure_dir(p: str):
    d = os.path.dirname(p)
    if d and not os.path.exists(d):
        os.makedirs(d, exist_ok=True)


def _path_color_by_room(result: dict) -> Dict[str, str]:
    """Interior room -> colour of the selected path running through it."""
    colors = {}
    for idx, info in enumerate(result.get("paths", [])):
        for room in info.get("rooms", [])[1:-1]:
            colors[room] = PALETTE[idx % len(PALETTE)]
    return colors


def _limits(ax, coords: Dict[str, Tuple[float, float]]):
    xs = [v[0] for v in coords.values()]
    ys = [v[1] for v in coords.values()]
    pad_x = (max(xs) - min(xs)) * 0.05 + 1
    pad_y = (max(ys) - min(ys)) * 0.1 + 1
    ax.set_xlim(min(xs) - pad_x, max(xs) + pad_x)
    ax.set_ylim(min(ys) - pad_y, max(ys) + pad_y)


def plot_paths(result: dict, savepath: str = "out/farm_paths.png"):
    """Farm graph with every tunnel in grey and selected paths drawn on top."""
    _ensure_dir(savepath)
    import numpy as np

    coords = result["coords"]
    start, end = result["start"], result["end"]
    fig, ax = plt.subplots(figsize=(8.5, 5.5))

    for (u, v) in result.get("tunnels", []):
        ax.plot([coords[u][0], coords[v][0]], [coords[u][1], coords[v][1]], color="#cccccc", lw=1, zorder=1)

    for idx, info in enumerate(result.get("paths", [])):
        c = PALETTE[idx % len(PALETTE)]
        rooms = info.get("rooms", [])
        for u, v in zip(rooms, rooms[1:]):
            ax.annotate(
                "",
                xy=(coords[v][0], coords[v][1]),
                xytext=(coords[u][0], coords[u][1]),
                arrowprops=dict(arrowstyle="->", color=c, lw=2, alpha=0.8),
            )
        ax.scatter([], [], color=c, label=f"len {info.get('length')} / {info.get('ants', 0)} ants")

    names = list(coords)
    xy = np.array([coords[n] for n in names], dtype=float)
    colors = [
        "#2ca02c" if n == start else "#d62728" if n == end else "#999999"
        for n in names
    ]
    ax.scatter(xy[:, 0], xy[:, 1], marker="s", s=110, c=colors, edgecolors="#555555", linewidths=0.8, zorder=3)
    for n in names:
        ax.text(coords[n][0], coords[n][1] + 0.25, n, fontsize=8, color="#111", ha="center", zorder=4)

    _limits(ax, coords)
    ax.set_aspect("equal", adjustable="box")
    ax.set_title(f"Selected paths ({len(result.get('paths', []))} disjoint)")
    ax.legend(loc="upper left", fontsize=8, frameon=False)
    fig.tight_layout(pad=1.4)
    fig.savefig(savepath, dpi=150)
    plt.close(fig)


def plot_gantt(result: dict, savepath: str = "out/gantt.png"):
    """One row per ant, one bar per turn spent in an interior room."""
    _ensure_dir(savepath)
    positions: Dict[int, List[str]] = result.get("positions", {})
    start, end = result["start"], result["end"]
    room_color = _path_color_by_room(result)

    fig, ax = plt.subplots(figsize=(10, 2 + 0.35 * max(len(positions), 1)))
    yticks = []
    yticklbls = []
    y = 0
    for aid in sorted(positions, key=int):
        seq = positions[aid]
        for turn, room in enumerate(seq):
            if room in (start, end):
                continue
            base = room_color.get(room, "#7f7f7f")
            ax.broken_barh([(turn - 0.5, 1.0)], (y, 0.8), facecolors=mcolors.to_rgb(base), edgecolors="none", alpha=0.9)
            if len(positions) <= 40:
                ax.text(turn, y + 0.4, room, ha="center", va="center", fontsize=7, color="#111")
        arrived = next((t for t, room in enumerate(seq) if room == end), None)
        if arrived is not None:
            ax.plot([arrived], [y + 0.4], marker="|", color="#d62728", markersize=10)
        yticks.append(y + 0.4)
        yticklbls.append(f"ant {aid}")
        y += 1

    ax.set_yticks(yticks)
    ax.set_yticklabels(yticklbls, fontsize=7)
    ax.invert_yaxis()
    ax.set_xlabel("Turn")
    ax.set_xlim(0, max(result.get("turns", 0), 1) + 0.5)
    ax.grid(True, axis="x", linestyle=":", alpha=0.4)
    ax.set_title(f"Room held per ant ({result.get('turns', 0)} turns)")
    fig.tight_layout()
    fig.savefig(savepath, dpi=150)
    plt.close(fig)


def animate_gif(
    result: dict,
    savepath: str = "out/anim.gif",
    frames_per_turn: int = 6,
    fps: int = 12,
    figsize=(8, 5),
    dpi: int = 110,
):
    """Animate ant positions turn by turn, interpolating along tunnels."""
    _ensure_dir(savepath)
    import numpy as np
    from matplotlib.animation import FuncAnimation, PillowWriter

    coords = result["coords"]
    positions: Dict[int, List[str]] = result.get("positions", {})
    turns = int(result.get("turns", 0))
    if not positions or turns <= 0:
        fig, ax = plt.subplots(figsize=(6, 3))
        ax.text(0.5, 0.5, "No animation (no moves)", ha="center", va="center")
        fig.savefig(savepath, dpi=120)
        plt.close(fig)
        return

    fig, ax = plt.subplots(figsize=figsize, dpi=dpi)
    for (u, v) in result.get("tunnels", []):
        ax.plot([coords[u][0], coords[v][0]], [coords[u][1], coords[v][1]], color="#dddddd", lw=1, zorder=1)
    names = list(coords)
    xy = np.array([coords[n] for n in names], dtype=float)
    ax.scatter(xy[:, 0], xy[:, 1], marker="s", s=90, c="#bbbbbb", edgecolors="#888888", zorder=2)
    for n in names:
        ax.text(coords[n][0] + 0.15, coords[n][1] + 0.15, n, fontsize=8, color="#333")

    ant_ids = sorted(positions, key=int)
    colors = [PALETTE[i % len(PALETTE)] for i in range(len(ant_ids))]
    dots = ax.scatter(
        [coords[positions[a][0]][0] for a in ant_ids],
        [coords[positions[a][0]][1] for a in ant_ids],
        s=60,
        c=colors,
        edgecolors="#ffffff",
        linewidths=1.2,
        zorder=5,
    )
    turn_text = ax.text(0.01, 0.98, "turn 0", transform=ax.transAxes, ha="left", va="top", fontsize=11,
                        bbox=dict(boxstyle="round,pad=0.25", facecolor="white", edgecolor="none", alpha=0.7))

    for spine in ["top", "right", "left", "bottom"]:
        ax.spines[spine].set_visible(False)
    ax.tick_params(left=False, bottom=False, labelleft=False, labelbottom=False)
    _limits(ax, coords)
    ax.set_aspect("equal", adjustable="box")
    ax.set_title("AntFarm Animation")

    n_frames = turns * frames_per_turn + 1

    def update(frame_idx):
        turn, sub = divmod(frame_idx, frames_per_turn)
        a = sub / frames_per_turn
        offsets = []
        for aid in ant_ids:
            seq = positions[aid]
            p0 = coords[seq[min(turn, len(seq) - 1)]]
            p1 = coords[seq[min(turn + 1, len(seq) - 1)]]
            offsets.append((p0[0] * (1 - a) + p1[0] * a, p0[1] * (1 - a) + p1[1] * a))
        dots.set_offsets(offsets)
        turn_text.set_text(f"turn {min(turn + (1 if sub else 0), turns)}")
        return [dots, turn_text]

    anim = FuncAnimation(fig, update, frames=n_frames, interval=int(1000 / max(fps, 1)), blit=False)
    writer = PillowWriter(fps=fps)
    anim.save(savepath, writer=writer)
    plt.close(fig)
