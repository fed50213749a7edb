from models.errors import StarPolygonError
from models.star_spec import BoundingBox, StarSpec
from generators.star_polygon import compute_star_outline, outline_inner_radius
from generators.path_assembler import assemble_path
from visualization.save_outputs import render_star, save_star_outputs
from utils.image_io import ensure_output_dir

from config import (
    OUTPUT_FOLDER,
    get_active_params,
)


def process_star(name: str):
    """
    Runs the complete pipeline for one preset:
      1. Build the StarSpec from the preset and active params
      2. Compute the outline points, path and inner radius once
      3. Render that path (and guides) onto a canvas
      4. Rasterize the outline mask
      5. Save all outputs (star, mask)
    """

    print(f"\n=== Processing star preset: {name} ===")
    params = get_active_params()

    # ------------------------------
    # STEP 1 — SPEC
    # ------------------------------
    box = BoundingBox.square(
        params["STAR_SIZE"],
        left=params["STAR_MARGIN"],
        top=params["STAR_MARGIN"],
    )
    spec = StarSpec.from_preset(
        name,
        box,
        outlined=params["OUTLINED"],
        rotation_degrees=params["ROTATION_DEGREES"],
    )

    # ------------------------------
    # STEP 2 — GEOMETRY
    # ------------------------------
    try:
        points = compute_star_outline(spec)
    except StarPolygonError as e:
        print(f"[WARN] {name} {{{spec.num_points}/{spec.density}}}: {e}. Skipping.")
        return

    path = assemble_path(points, spec.x_offset, spec.y_offset)
    inner_radius = outline_inner_radius(spec, points)

    # ------------------------------
    # STEP 3/4 — RENDER & MASK
    # ------------------------------
    image, mask = render_star(spec, path, inner_radius, params["IMAGE_SIZE"])

    # ------------------------------
    # STEP 5 — SAVE OUTPUTS
    # ------------------------------
    save_star_outputs(
        output_dir=OUTPUT_FOLDER,
        name=name,
        image=image,
        mask=mask,
    )

    print(f"[OK] Finished {name} ({len(points)} vertices)")


def main():
    """
    Main entry point:
      - Reads the star presets
      - Processes each one independently
      - Saves output files
    """
    ensure_output_dir(OUTPUT_FOLDER)

    presets = get_active_params()["STAR_PRESETS"]
    if not presets:
        print("[ERROR] No star presets configured")
        return

    for name in presets:
        process_star(name)

    print("\n=== All stars processed ===")


if __name__ == "__main__":
    main()
