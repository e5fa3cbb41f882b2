"""Catalogue of front-of-pipeline components: language bridges, UIs and layout engines."""

from __future__ import annotations

from collections.abc import Sequence

from interspace.lang import Lang
from interspace.model import (
    ComponentEntry,
    Info,
    LangbridgeExtra,
    LayoutExtra,
    Reactivity,
    Repo,
    RoughRange,
    SourceOpenness,
    UiExtra,
    UiLang,
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


def _todo_ui(**overrides) -> UiExtra:
    """UI extra info with every field unknown unless overridden."""
    fields = {"language": UiLang.of(Lang.TODO)}
    fields.update(overrides)
    return UiExtra(**fields)


def _web_ui(reactivity: Reactivity = Reactivity.TODO) -> UiExtra:
    return UiExtra(
        is_immediate=False,
        reactivity=reactivity,
        declarativity=RoughRange.HI,
        macrotivity=RoughRange.NONE,
        language=UiLang.of(Lang.JAVASCRIPT),
        hot_reload=True,
        ssr=True,
        liveview=False,
    )


def langbridge_entries() -> list[ComponentEntry]:
    """Language bridge components."""
    return [
        ComponentEntry(
            "Erithaxlangbridge",
            _info(
                "Erithax Langbridge",
                "Erithax",
                "TODO",
                "https://erithax.com",
                SourceOpenness.COPYLEFT,
                [Lang.RUST],
            ),
            LangbridgeExtra(bind_langs=[Lang.C]),
            parse_tree("$"),
        ),
        ComponentEntry(
            "Gtk3rs",
            _info(
                "Gtk3-rs",
                "Gtkrs",
                "TODO",
                "https://gtk-rs.org",
                SourceOpenness.COPYLEFT,
                [Lang.RUST],
                "https://github.com/gtk-rs/gtk3-rs",
            ),
            LangbridgeExtra(bind_langs=[Lang.RUST]),
            [["Gtk3rs", "Gtk"]],
        ),
    ]


def ui_entries() -> list[ComponentEntry]:
    """UI framework components."""
    na = SourceOpenness.NA
    return [
        ComponentEntry(
            "Erithaxui",
            _info("Erithax UI", "Erithax", "N/A", "https://www.erithax.com/", na, [Lang.RUST]),
            _todo_ui(),
            parse_tree("$"),
        ),
        ComponentEntry(
            "Angular",
            _info(
                "Angular",
                "Google",
                "Model-view-controller / model-view-viewmodel UI framework for the DOM",
                "https://angularjs.org",
                SourceOpenness.SUPEROPEN,
                [Lang.JAVASCRIPT],
                "https://github.com/angular/angular",
            ),
            UiExtra(
                is_immediate=False,
                reactivity=Reactivity.TODO,
                declarativity=RoughRange.MID,
                macrotivity=RoughRange.NONE,
                language=UiLang.of(Lang.JAVASCRIPT),
                hot_reload=False,
                ssr=False,
                liveview=False,
            ),
            parse_tree("$ Dom *"),
        ),
        ComponentEntry(
            "Dom",
            _info(
                "DOM",
                "Webstandards",
                "Document Object Model is a cross-platform language-independant interface "
                "that treats HTML or XML as a tree structure",
                "https://dom.spec.whatwg.org",
                na,
                [Lang.TODO],
            ),
            _todo_ui(),
            parse_tree("$ Gecko_ly *, $ Servo_ly *, $ Blink_ly *, $ Webkit_ly *,"),
        ),
        ComponentEntry(
            "Dioxus",
            _info(
                "Dioxus",
                "Dioxuslabs",
                "Cross-platform, portable UI framework using hooks and VDOM",
                "https://dioxuslabs.com",
                na,
                [Lang.RUST],
                "https://github.com/dioxuslabs/dioxus",
            ),
            _todo_ui(),
            parse_tree("$ Dom *"),
        ),
        ComponentEntry(
            "Druid",
            _info(
                "Druid",
                "Linebender",
                "TODO",
                "Data-first Rust-native UI toolkit",
                na,
                [Lang.RUST],
                "https://github.com/linebender/druid",
            ),
            _todo_ui(),
            parse_tree("$ Piet"),
        ),
        ComponentEntry(
            "Egui",
            _info(
                "Egui",
                "Emilk",
                "Easy-to-use immediate-mode GUI for Rust",
                "https://www.egui.rs",
                na,
                [Lang.RUST],
                "https://github.com/emilk/egui",
            ),
            _todo_ui(is_immediate=True),
            parse_tree("$"),
        ),
        ComponentEntry(
            "Fltk",
            _info(
                "Fltk",
                "TODO",
                "Cross-platform Widget libray for GUIs made to accommodate 3D graphics programming",
                "https://fltk.org",
                na,
                [Lang.TODO],
                "https://github.com/fltk/fltk",
            ),
            _todo_ui(),
            parse_tree("$ Xwindow, $ Direct2d, $ Coregraphics,"),
        ),
        ComponentEntry(
            "Flutter",
            _info(
                "Flutter",
                "Google",
                "Cross-platform UI development kit",
                "https://flutter.dev",
                na,
                [Lang.C],
                "https://github.com/flutter/flutter",
            ),
            _todo_ui(),
            parse_tree("$ Flutter_ly *"),
        ),
        ComponentEntry(
            "Gtk",
            _info(
                "GTK",
                "Gnome",
                "Cross-platform widget toolkit for creating GUIs",
                "https://gtk.org",
                na,
                [Lang.C],
                "https://gitlab.gnome.org/GNOME/gtk",
            ),
            _todo_ui(),
            parse_tree("$ Gdk *, $ Cairo"),
        ),
        ComponentEntry(
            "Iced",
            _info(
                "Iced",
                "Icedrs",
                "Cross-native-desktop GUI library for Rust focused on simplicity and type-safety",
                "https://iced.rs",
                na,
                [Lang.RUST],
                "https://github.com/iced-rs/iced",
            ),
            _todo_ui(),
            parse_tree("$"),
        ),
        ComponentEntry(
            "Leptos",
            _info(
                "Leptos",
                "Leptosrs",
                "UI-framework for Rust with fine-grained reactivity for the DOM",
                "https://leptos.dev",
                na,
                [Lang.RUST],
                "https://github.com/leptos-rs/leptos",
            ),
            _todo_ui(),
            parse_tree("$ Dom *"),
        ),
        ComponentEntry(
            "Qt",
            _info(
                "Qt",
                "Qtcompany",
                "Cross-platform (including embedded), cross-language UI-framework",
                "https://qt.io",
                na,
                [Lang.CPP],
                "https://code.qt.io/cgit/",
            ),
            _todo_ui(),
            parse_tree("$ Xwindow"),
        ),
        ComponentEntry(
            "React",
            _info(
                "React",
                "Meta",
                "UI-framework for JavaScript, supporting components and incremental "
                "rerenders for the DOM",
                "https://react.dev",
                SourceOpenness.SUPEROPEN,
                [Lang.JAVASCRIPT],
                "https://github.com/facebook/react",
            ),
            _web_ui(Reactivity.REACTY),
            parse_tree("$ Dom *"),
        ),
        ComponentEntry(
            "Sciter",
            _info(
                "Sciter",
                "Terrainformatica",
                "Cross-platform embeddable HTML/CSS/JavaScript engine",
                "https://sciter.com",
                na,
                [Lang.CPP],
                "https://github.com/sciter-sdk/rust-sciter",
            ),
            _todo_ui(),
            parse_tree("$ Cairo, $ Direct2d, $ Coregraphics"),
        ),
        ComponentEntry(
            "Slint",
            _info(
                "Slint",
                "Sixtyfps",
                "Cross-platform native and embedded GUI toolkit for Rust, C++, or JavaScript",
                "https://slint.dev",
                na,
                [Lang.RUST],
                "https://github.com/slint-ui/slint",
            ),
            _todo_ui(),
            parse_tree("$ Skia, $ Slintcpu, $ Femtovg,"),
        ),
        ComponentEntry(
            "Svelte",
            _info(
                "Svelte",
                "Svelte",
                "Front-end component framework that compiles HTML templates to code "
                "that manipulates the DOM",
                "https://svelte.dev/",
                SourceOpenness.SUPEROPEN,
                [Lang.JAVASCRIPT],
                "https://github.com/sveltejs/svelte",
            ),
            _web_ui(),
            parse_tree("$ Dom *"),
        ),
        ComponentEntry(
            "SwiftUI",
            _info(
                "SwiftUI",
                "Apple",
                "Declarative UI framework for all Apple platforms",
                "",
                na,
                [],
            ),
            _todo_ui(reactivity=Reactivity.SWIFTY, language=UiLang.of(Lang.SWIFT)),
            parse_tree("$ Coregraphics *"),
        ),
        ComponentEntry(
            "Vue",
            _info(
                "Vue",
                "Vue",
                "Model-view-viewmodel Javascript UI library with components and "
                "declarative rendering",
                "https://vuejs.org",
                SourceOpenness.SUPEROPEN,
                [],
                "https://github.com/vuejs/vue",
            ),
            _web_ui(),
            parse_tree("$ Dom *"),
        ),
        ComponentEntry(
            "Xilem",
            _info(
                "Xilem",
                "Linebender",
                "TODO",
                "",
                na,
                [Lang.RUST],
                "https://github.com/linebender/xilem",
            ),
            _todo_ui(),
            parse_tree("$ Taffy Vello *"),
        ),
        ComponentEntry(
            "Yew",
            _info(
                "Yew",
                "Yew",
                "UI framework for webapps with with WebAssembly",
                "https://yew.rs",
                na,
                [Lang.RUST],
                "https://github.com/yewstack/yew",
            ),
            _todo_ui(),
            parse_tree("$ Dom *"),
        ),
    ]


def _web_layout() -> LayoutExtra:
    return LayoutExtra(constraint_based=False, css=True, flexbox=True, grid=True)


def layout_entries() -> list[ComponentEntry]:
    """Layout engine components."""
    na = SourceOpenness.NA
    return [
        ComponentEntry(
            "Erithaxlayout",
            _info("Erithax Layout", "Erithax", "TODO", "erithax.com", na, [Lang.RUST]),
            LayoutExtra(constraint_based=False, css=False, flexbox=False, grid=False),
            parse_tree("$"),
        ),
        ComponentEntry(
            "Blink_ly",
            _info("Blink", "Google", "TODO", "", na, []),
            _web_layout(),
            parse_tree("$ Blink_pa *"),
        ),
        ComponentEntry(
            "Flutter_ly",
            _info(
                "Flutter layout",
                "Google",
                "TODO",
                "https://api.flutter.dev/flutter/rendering/rendering-library.html",
                SourceOpenness.SUPEROPEN,
                [Lang.DART],
            ),
            LayoutExtra(constraint_based=False, css=False, flexbox=True, grid=True),
            parse_tree("$ Flutter_pa *"),
        ),
        ComponentEntry(
            "Gecko_ly",
            _info("Gecko", "Mozilla", "TODO", "", na, []),
            _web_layout(),
            parse_tree("$ Gecko_pa *,"),
        ),
        ComponentEntry(
            "Servo_ly",
            _info("Servo", "LinuxFoundation", "TODO", "", na, [Lang.RUST]),
            _web_layout(),
            parse_tree("$ Servo_pa *"),
        ),
        ComponentEntry(
            "Webkit_ly",
            _info("Webkit", "Apple", "TODO", "", na, []),
            _web_layout(),
            parse_tree("$ Webkit_pa *"),
        ),
        ComponentEntry(
            "Taffy",
            _info(
                "Taffy",
                "Dioxuslabs",
                "TODO",
                "",
                na,
                [Lang.RUST],
                "https://github.com/DioxusLabs/taffy",
            ),
            LayoutExtra(constraint_based=False, css=True, flexbox=True, grid=False),
            parse_tree("$ Vello *"),
        ),
    ]