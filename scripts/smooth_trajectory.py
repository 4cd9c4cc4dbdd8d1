import sys
from pathlib import Path

# Add src/ to Python path when running from a checkout
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from trajectory_smoothing.data import load_points, save_points
from trajectory_smoothing.smoothing import SmoothingConfig, smooth_trajectory

points = load_points('your_data.gpdata')
config = SmoothingConfig(coefficient_count=45, sample_count=150, seed=0)  # adjust as needed
result = smooth_trajectory(points, config)

# Smoothed x(t), y(t), z(t) on a uniform parameter grid
save_points(result.points, '/tmp/your_data_smoothed.gpdata')
print(f"{len(points)} samples -> {len(result)} smoothed points, t in [0, {result.t[-1]:.3f}]")
