"""
Run all lifty examples.
"""
import os
import subprocess
import sys
from pathlib import Path

examples_dir = Path(__file__).parent

examples = [
    "crane_capacity.py",
    "rigging_analysis.py",
    "ground_bearing.py",
    "swing_clearance.py",
]

print("=" * 60)
print("RUNNING ALL LIFTY EXAMPLES")
print("=" * 60)

env = os.environ.copy()
env["PYTHONPATH"] = os.pathsep.join([str(examples_dir.parent / "src"), env.get("PYTHONPATH", "")])
env.setdefault("MPLBACKEND", "Agg")

for example in examples:
    print(f"\n{'─' * 60}")
    print(f"Running: {example}")
    print("─" * 60)

    result = subprocess.run([sys.executable, str(examples_dir / example)], env=env)

    if result.returncode != 0:
        print(f"❌ {example} failed!")
    else:
        print(f"✓ {example} completed")

print("\n" + "=" * 60)
print("ALL EXAMPLES COMPLETE")
print("=" * 60)
