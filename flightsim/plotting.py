"""
Ring Flight Simulation - Flight Visualization

Post-flight plots built from a SimulationLog:
- Altitude vs time
- Ground track (X/Z) with ring markers
- Throttle and fuel vs time
- Score vs time
"""

import os
from dataclasses import dataclass
from typing import List, Sequence

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for batch processing
import matplotlib.pyplot as plt
import numpy as np

from .rings import Ring


# =============================================================================
# Data Structures
# =============================================================================

@dataclass
class FlightData:
    """Container for log channels converted to numpy arrays.

    Attributes:
        time: Time array in seconds
        position: Position array [n x 3] in meters
        speed: Speed in m/s
        throttle: Throttle fraction [0, 1]
        fuel: Remaining fuel units
        score: Accumulated score
    """
    time: np.ndarray
    position: np.ndarray
    speed: np.ndarray
    throttle: np.ndarray
    fuel: np.ndarray
    score: np.ndarray


# =============================================================================
# Configuration
# =============================================================================

def configure_plot_style() -> None:
    """Shared matplotlib defaults for all flight plots."""
    plt.rcParams.update({
        'figure.figsize': (10, 6),
        'savefig.dpi': 150,
        'axes.grid': True,
        'axes.axisbelow': True,
        'grid.alpha': 0.3,
        'font.size': 11,
        'axes.titlesize': 13,
        'axes.labelsize': 12,
        'legend.fontsize': 10,
        'lines.linewidth': 1.8,
    })


# =============================================================================
# Data Processing
# =============================================================================

def extract_log_data(log) -> FlightData:
    """Convert a SimulationLog into numpy arrays.

    Raises:
        ValueError: If the log is empty
    """
    if len(log.time) == 0:
        raise ValueError("Cannot plot an empty simulation log")
    return FlightData(
        time=np.asarray(log.time, dtype=float),
        position=np.column_stack([log.position_x, log.position_y, log.position_z]),
        speed=np.asarray(log.speed, dtype=float),
        throttle=np.asarray(log.throttle, dtype=float),
        fuel=np.asarray(log.fuel, dtype=float),
        score=np.asarray(log.score, dtype=float),
    )


# =============================================================================
# Individual Plots
# =============================================================================

def plot_altitude_profile(data: FlightData, output_dir: str) -> str:
    """Altitude vs time."""
    fig, ax = plt.subplots()
    altitude = data.position[:, 1]

    ax.fill_between(data.time, 0, altitude, alpha=0.25, color='#1f77b4')
    ax.plot(data.time, altitude, 'b-', linewidth=2, label='Altitude')
    ax.scatter([data.time[0]], [altitude[0]], c='green', s=80, marker='o',
               zorder=5, label='Start')
    ax.scatter([data.time[-1]], [altitude[-1]], c='darkorange', s=90, marker='*',
               zorder=5, label=f'Final ({altitude[-1]:.1f} m)')

    ax.set_xlabel('Time (s)')
    ax.set_ylabel('Altitude (m)')
    ax.set_title('Altitude Profile', fontweight='bold')
    ax.legend(loc='best')
    ax.set_ylim(0, None)

    plt.tight_layout()
    path = os.path.join(output_dir, '01_altitude_profile.png')
    fig.savefig(path, bbox_inches='tight')
    plt.close(fig)
    return path


def plot_ground_track(data: FlightData, rings: Sequence[Ring], output_dir: str) -> str:
    """Top-down track (Z downrange vs X lateral) with the ring field."""
    fig, ax = plt.subplots()
    ax.plot(data.position[:, 2], data.position[:, 0], 'b-', label='Track')

    for ring in rings:
        color = 'green' if ring.passed else 'red'
        circle = plt.Circle((ring.position[2], ring.position[0]), ring.radius,
                            fill=False, color=color, linewidth=1.5)
        ax.add_patch(circle)

    # Legend entries for ring colours
    ax.plot([], [], 'o', mfc='none', color='green', label='Ring passed')
    ax.plot([], [], 'o', mfc='none', color='red', label='Ring missed')

    ax.set_xlabel('Downrange Z (m)')
    ax.set_ylabel('Lateral X (m)')
    ax.set_title('Ground Track', fontweight='bold')
    ax.set_aspect('equal', adjustable='datalim')
    ax.legend(loc='best')

    plt.tight_layout()
    path = os.path.join(output_dir, '02_ground_track.png')
    fig.savefig(path, bbox_inches='tight')
    plt.close(fig)
    return path


def plot_throttle_fuel(data: FlightData, output_dir: str) -> str:
    """Throttle (left axis) and fuel (right axis) vs time."""
    fig, ax = plt.subplots()
    ax.plot(data.time, data.throttle * 100.0, 'tab:blue', label='Throttle')
    ax.set_xlabel('Time (s)')
    ax.set_ylabel('Throttle (%)', color='tab:blue')
    ax.set_ylim(0, 105)

    ax2 = ax.twinx()
    ax2.plot(data.time, data.fuel, 'tab:red', label='Fuel')
    ax2.set_ylabel('Fuel (u)', color='tab:red')
    ax2.set_ylim(0, None)

    ax.set_title('Throttle & Fuel', fontweight='bold')

    plt.tight_layout()
    path = os.path.join(output_dir, '03_throttle_fuel.png')
    fig.savefig(path, bbox_inches='tight')
    plt.close(fig)
    return path


def plot_score(data: FlightData, output_dir: str) -> str:
    """Score vs time as a step plot."""
    fig, ax = plt.subplots()
    ax.step(data.time, data.score, where='post', color='purple')
    ax.set_xlabel('Time (s)')
    ax.set_ylabel('Score')
    ax.set_title('Score', fontweight='bold')

    plt.tight_layout()
    path = os.path.join(output_dir, '04_score.png')
    fig.savefig(path, bbox_inches='tight')
    plt.close(fig)
    return path


def generate_all_plots(log, rings: Sequence[Ring], output_dir: str = "plots") -> List[str]:
    """Generate all flight plots.

    Args:
        log: SimulationLog from a finished session
        rings: Final ring field (passed flags colour the ground track)
        output_dir: Directory to save plots (created if doesn't exist)

    Returns:
        List of paths to saved plot files
    """
    os.makedirs(output_dir, exist_ok=True)
    configure_plot_style()
    data = extract_log_data(log)

    return [
        plot_altitude_profile(data, output_dir),
        plot_ground_track(data, rings, output_dir),
        plot_throttle_fuel(data, output_dir),
        plot_score(data, output_dir),
    ]
