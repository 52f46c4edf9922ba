"""
Blender-side model to GLB export

Run inside Blender, not imported by anyglb:
    blender --background --python blender_script.py -- --input in.fbx --output out.glb
"""

import os
import sys


def _parse_args(argv):
    try:
        args = argv[argv.index("--") + 1:]
    except ValueError:
        args = []

    input_path = None
    output_path = None
    i = 0
    while i < len(args):
        if args[i] == "--input" and i + 1 < len(args):
            input_path = args[i + 1]
            i += 2
        elif args[i] == "--output" and i + 1 < len(args):
            output_path = args[i + 1]
            i += 2
        else:
            i += 1
    return input_path, output_path


def _import_model(bpy, path):
    ext = os.path.splitext(path)[1].lower()
    if ext == ".fbx":
        bpy.ops.import_scene.fbx(filepath=path)
    elif ext == ".obj":
        bpy.ops.wm.obj_import(filepath=path)
    elif ext == ".stl":
        bpy.ops.wm.stl_import(filepath=path)
    elif ext == ".ply":
        bpy.ops.wm.ply_import(filepath=path)
    elif ext == ".dae":
        bpy.ops.wm.collada_import(filepath=path)
    elif ext in (".gltf", ".glb"):
        bpy.ops.import_scene.gltf(filepath=path)
    else:
        raise ValueError(f"No Blender importer for {ext}")


def blender_entrypoint() -> None:
    import bpy  # type: ignore

    input_path, output_path = _parse_args(sys.argv)
    if not input_path or not output_path:
        print("Usage: blender --background --python blender_script.py -- --input IN --output OUT.glb")
        sys.exit(2)

    bpy.ops.wm.read_factory_settings(use_empty=True)

    try:
        _import_model(bpy, input_path)
        if not bpy.data.objects:
            raise ValueError("No objects imported")
        bpy.ops.export_scene.gltf(filepath=output_path, export_format='GLB')
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    blender_entrypoint()
