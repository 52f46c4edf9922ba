"""
anyglb Quick Start Example

Converts the bundled cube.obj to GLB, printing every notice.
"""

from pathlib import Path

from anyglb import ModelConverter, run_conversion

here = Path(__file__).parent
output_dir = here / "output"
output_dir.mkdir(exist_ok=True)

# One converter can be reused for any number of files
converter = ModelConverter()

result = run_conversion(
    str(here / "cube.obj"),
    str(output_dir / "cube.glb"),
    {"notice_level": 1},
    converter=converter,
)

for notice in result.notices:
    print(notice)

if result.did_succeed:
    print("✅ Saved to output/cube.glb")
else:
    print("❌ Conversion failed")
