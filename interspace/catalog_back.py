"""Catalogue of back-of-pipeline components: painters, rasterizers, graphics APIs,
graphics translation layers and platforms."""

from __future__ import annotations

from collections.abc import Sequence

from interspace.lang import Lang
from interspace.model import (
    BasicExtra,
    ComponentEntry,
    ComponentType,
    Info,
    Repo,
    SourceOpenness,
)
from interspace.parsetree import parse_tree


def _info(
    name: str,
    owner: str,
    description: str,
    website: str,
    openness: SourceOpenness,
    langs: Sequence[Lang],
    repo_url: str | None = None,
) -> Info:
    return Info(
        name=name,
        owner=owner,
        description=description,
        website=website,
        code_openness=openness,
        impl_langs=list(langs),
        source=None if repo_url is None else Repo.with_url(repo_url),
    )


def _entry(kind: ComponentType, str_id: str, info: Info, tree: str) -> ComponentEntry:
    return ComponentEntry(str_id, info, BasicExtra(kind), parse_tree(tree))


def paint_entries() -> list[ComponentEntry]:
    """Paint components."""
    na = SourceOpenness.NA
    kind = ComponentType.PAINT
    return [
        _entry(
            kind,
            "Erithaxpaint",
            _info("Erithax Paint", "Erithax", "TODO", "", na, [Lang.RUST]),
            "$",
        ),
        _entry(
            kind,
            "Blink_pa",
            _info("Blink", "Google", "TODO", "", na, [Lang.CPP]),
            "$ Skia *, $ Webgpu Dawn *",
        ),
        _entry(
            kind,
            "Flutter_pa",
            _info(
                "Flutter paint", "Google", "TODO", "", SourceOpenness.SUPEROPEN, [Lang.DART]
            ),
            "$ Skia *, $ Impeller *",
        ),
        _entry(
            kind,
            "Gecko_pa",
            _info("Gecko", "Mozilla", "TODO", "", na, []),
            "$ Webrender *",
        ),
        _entry(
            kind,
            "Servo_pa",
            _info("Servo", "LinuxFoundation", "TODO", "", na, [Lang.RUST]),
            "$ Webrender *",
        ),
        _entry(
            kind,
            "Webkit_pa",
            _info("Webkit", "Apple", "TODO", "", na, []),
            "$ Coregraphics *",
        ),
    ]


def raster_entries() -> list[ComponentEntry]:
    """Rasterizer components."""
    na = SourceOpenness.NA
    kind = ComponentType.RASTER
    return [
        _entry(
            kind,
            "Erithaxraster",
            _info("Erithax Raster", "Erithax", "TODO", "", na, [Lang.RUST]),
            "$",
        ),
        _entry(
            kind,
            "Gecko",
            _info("Gecko", "Mozilla", "TODO", "", na, [Lang.CPP], "https://hg.mozilla.org/"),
            "$ Angle,",
        ),
        _entry(
            kind,
            "Webrender",
            _info(
                "WebRender",
                "LinuxFoundation",
                "TODO",
                "",
                na,
                [Lang.RUST],
                "https://github.com/servo/webrender",
            ),
            "$ Angle, $ Webgpu Wgpu, $ Skia, $ Cairo,",
        ),
        _entry(
            kind,
            "Webkit",
            _info(
                "Webkit", "Apple", "TODO", "", na, [Lang.CPP], "https://github.com/WebKit/WebKit"
            ),
            "$ Angle,",
        ),
        _entry(
            kind,
            "Xwindow",
            _info(
                "XWindow Render",
                "Xorg",
                "TODO",
                "",
                na,
                [Lang.TODO],
                "https://gitlab.freedesktop.org/xorg",
            ),
            "$",
        ),
        _entry(
            kind,
            "Direct2d",
            _info("Direct2D", "Microsoft", "TODO", "", na, [Lang.TODO]),
            "$ D3d Windows,",
        ),
        _entry(
            kind,
            "Coregraphics",
            _info("Quartz", "Apple", "TODO", "", na, [Lang.TODO]),
            "$ Metal, $ Metal Macos, $ Metal Ios,",
        ),
        _entry(
            kind,
            "Gdk",
            _info(
                "GTK Drawing Kit",
                "Gnome",
                "TODO",
                "",
                na,
                [Lang.TODO],
                "https://gitlab.gnome.org/GNOME/gtk/-/tree/main/gdk",
            ),
            "$ Xwindow Linux, $ Coregraphics Macos, $ Direct2d Windows,",
        ),
        _entry(
            kind,
            "Cairo",
            _info("Cairo", "Cairogfx", "TODO", "", na, [Lang.TODO]),
            "$ Xwindow *, $ Coregraphics, $ Opengl, $ Opengl Windows, $ Opengl Linux, "
            "$ Opengl Macos, $ Pdf, $ Svg, $ Png,",
        ),
        _entry(
            kind,
            "Femtovg",
            _info(
                "femtovg",
                "Femtovg",
                "TODO",
                "",
                na,
                [Lang.RUST],
                "https://github.com/femtovg/femtovg",
            ),
            "$ Opengles",
        ),
        _entry(
            kind,
            "Impeller",
            _info(
                "Impeller",
                "Google",
                "TODO",
                "https://docs.flutter.dev/perf/impeller",
                SourceOpenness.SUPEROPEN,
                [Lang.CPP],
            ),
            "$ Metal Ios, $ Metal Macos, $ Vulkan Android,",
        ),
        _entry(
            kind,
            "Piet",
            _info(
                "Piet",
                "Linebender",
                "TODO",
                "",
                na,
                [Lang.RUST],
                "https://github.com/linebender/piet",
            ),
            "$ Direct2d Windows, $ Coregraphics Macos, $ Cairo Linux,",
        ),
        _entry(
            kind,
            "Skia",
            _info(
                "Skia", "Google", "TODO", "", na, [Lang.TODO], "https://github.com/google/skia"
            ),
            "$ Vulkan, $ Vulkan Windows, $ Vulkan Linux, $ Vulkan Android, $ Opengles, "
            "$ Opengles Angle, $ Opengles Angle D3d Windows, "
            "$ Opengles Angle Opengl Linux, $ Metal, $ Metal Ios, $ Metal Macos, "
            "$ Cpu, $ Svg, $ Pdf,",
        ),
        _entry(
            kind,
            "Slintcpu",
            _info("Slint CPU", "Sixtyfps", "TODO", "", na, [Lang.TODO]),
            "$ Cpu",
        ),
        _entry(
            kind,
            "Vello",
            _info(
                "Vello",
                "Linebender",
                "TODO",
                "",
                na,
                [Lang.RUST],
                "https://github.com/linebender/vello",
            ),
            "$ Wgpu *",
        ),
    ]


def gfxapi_entries() -> list[ComponentEntry]:
    """Graphics API components."""
    na = SourceOpenness.NA
    kind = ComponentType.GFXAPI
    return [
        _entry(
            kind,
            "Erithaxgfx",
            _info("Erithax GFX", "Erithax", "TODO", "", na, [Lang.RUST]),
            "$",
        ),
        _entry(kind, "Cpu", _info("CPU", "TODO", "TODO", "", na, [Lang.NA]), "$"),
        _entry(kind, "Vulkan", _info("Vulkan", "Khronos", "TODO", "", na, [Lang.C]), "$"),
        _entry(
            kind,
            "Opengl",
            _info("OpenGL", "Khronos", "TODO", "", na, [Lang.TODO]),
            "$ Windows, $ Macos, $ Android, $ Linux, $ Ios,",
        ),
        _entry(
            kind,
            "Opengles",
            _info("OpenGL ES", "Khronos", "TODO", "", na, [Lang.TODO]),
            "$ Windows, $ Linux, $ Macos, $ Android, $ Ios,",
        ),
        _entry(
            kind,
            "Webgl",
            _info("WebGL", "Khronos", "TODO", "", na, [Lang.TODO]),
            "$ Web,",
        ),
        _entry(
            kind,
            "Webgpu",
            _info("WebGPU", "Webstandards", "TODO", "", na, [Lang.NA]),
            "$ Web,",
        ),
        _entry(
            kind,
            "D3d",
            _info("D3d", "Microsoft", "TODO", "", na, [Lang.TODO]),
            "$ Windows,",
        ),
        _entry(
            kind,
            "Metal",
            _info("Metal", "Apple", "TODO", "", na, [Lang.TODO]),
            "$ Macos, $ Ios,",
        ),
    ]


def intergfx_entries() -> list[ComponentEntry]:
    """Graphics API translation layers."""
    na = SourceOpenness.NA
    kind = ComponentType.INTERGFX
    return [
        _entry(
            kind,
            "Erithaxintergfx",
            _info("Erithax InterGFX", "Erithax", "TODO", "", na, [Lang.RUST]),
            "$",
        ),
        _entry(
            kind,
            "Angle",
            _info(
                "ANGLE",
                "Google",
                "Almost Native Graphics Layer Engine: translates Opengl ES 2/3 calls to "
                "DirectX 9, 11, Opengl or Vulkan API calls",
                "",
                na,
                [Lang.TODO],
                "https://github.com/google/angle",
            ),
            "Opengles $ D3d Windows, Opengles $ Opengl Linux, Opengles $ Vulkan,",
        ),
        _entry(
            kind,
            "Dawn",
            _info(
                "Dawn",
                "Google",
                "Dawn is an open-source and cross-platform implementation of the "
                "work-in-progress WebGPU standard.",
                "",
                na,
                [Lang.CPP],
                "https://github.com/google/angle",
            ),
            "Webgpu $ Vulkan, Webgpu $ Vulkan Linux, Webgpu $ Vulkan Chromeos, "
            "Webgpu $ Opengles, Webgpu $ D3d Windows, Webgpu $ Metal *,",
        ),
        _entry(
            kind,
            "Dxvk",
            _info(
                "DXVK",
                "Doitsujin",
                "a Vulkan-based translation layer for D3d 9/10/11 which allows running "
                "3D applications on Linux using Wine.",
                "",
                na,
                [Lang.TODO],
                "https://github.com/doitsujin/dxvk",
            ),
            "D3d $ Vulkan,",
        ),
        _entry(
            kind,
            "Glow",
            _info(
                "GLOW",
                "Grovesnl",
                "GL on Whatever: a set of bindings to run GL anywhere (Open GL, Opengl ES, "
                "and Webgl) and avoid target-specific code.",
                "",
                na,
                [Lang.TODO],
                "https://github.com/grovesNL/glow",
            ),
            "Opengles $ Opengl, Opengles $ Webgl,",
        ),
        _entry(
            kind,
            "Moltenvk",
            _info(
                "MoltenVK",
                "Khronos",
                "MoltenVK allows Vulkan applications to run on top of Metal on Apple's "
                "macOS, iOS, and tvOS operating systems",
                "",
                na,
                [Lang.TODO],
                "https://github.com/KhronosGroup/MoltenVK",
            ),
            "Vulkan $ Metal,",
        ),
        _entry(
            kind,
            "Wgpu",
            _info(
                "wgpu",
                "Gfxrs",
                "wgpu is a cross-platform, safe, pure-rust graphics api. It runs natively "
                "on Vulkan, Metal, D3D12, D3D11, and Opengles; and on top of Webgpu on "
                "wasm. The api is based on the Webgpu standard. It serves as the core of "
                "the Webgpu integration in Firefox, Servo, and Deno.",
                "https://wgpu.rs",
                na,
                [Lang.RUST],
                "https://github.com/gfx-rs/wgpu",
            ),
            "Webgpu $ Opengles, Webgpu $ Opengles Glow *, Webgpu $ Vulkan *, "
            "Webgpu $ D3d Windows, Webgpu $ Metal,",
        ),
    ]


def platform_entries() -> list[ComponentEntry]:
    """Platform components."""
    na = SourceOpenness.NA
    kind = ComponentType.PLATFORM

    def leaf(str_id: str, name: str, owner: str, langs, repo_url=None) -> ComponentEntry:
        return _entry(kind, str_id, _info(name, owner, "TODO", "", na, langs, repo_url), "$")

    return [
        leaf("Erithaxplatform", "Erithax Platform", "Erithax", [Lang.RUST]),
        leaf("Linux", "Linux", "LinuxFoundation", [Lang.C], "https://git.kernel.org"),
        leaf("Windows", "Windows", "Microsoft", [Lang.TODO]),
        leaf("Macos", "MacOS", "Apple", [Lang.TODO]),
        leaf(
            "Android", "Android", "Google", [Lang.TODO], "https://android.googlesource.com/"
        ),
        leaf("Ios", "Ios", "Apple", [Lang.TODO]),
        leaf("Chromeos", "ChromeOS", "Google", [Lang.TODO]),
        leaf("Web", "Web", "Webstandards", [Lang.NA]),
        leaf("Svg", "SVG", "Webstandards", [Lang.NA]),
        leaf("Pdf", "PDF", "Adobe", [Lang.NA]),
        leaf("Png", "PNG", "Webstandards", [Lang.NA]),
    ]