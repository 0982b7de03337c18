# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""StyleSwap - product photo backdrop replacement."""

import uuid

import mesop as me

from common.analytics import analytics_logger, log_page_view, log_ui_click, track_click
from common.credentials import SessionCredentialSelector
from common.error_handling import BackdropError
from components.download_button.download_button import download_button
from config.backdrop_presets import BACKDROP_PRESETS
from config.default import Default as cfg
from config.gemini_image_models import get_gemini_image_model_config
from models.image_intake import load_image
from services.backdrop_controller import AppStatus, BackdropController
from state.state import AppState
from state.styleswap_state import PageState

BILLING_DOCS_URL = "https://ai.google.dev/gemini-api/docs/billing"

ACCENT = "#ea580c"

CARD_STYLE = me.Style(
    background=me.theme_var("surface-container-lowest"),
    padding=me.Padding.all(24),
    border_radius=16,
    border=me.Border.all(me.BorderSide(width=1, style="solid", color="#ffedd5")),
)

PREVIEW_CARD_STYLE = me.Style(
    flex_grow=1,
    min_height=500,
    display="flex",
    flex_direction="column",
    background=me.theme_var("surface-container-lowest"),
    padding=me.Padding.all(24),
    border_radius=16,
    border=me.Border.all(me.BorderSide(width=1, style="solid", color="#ffedd5")),
)

PANEL_IMAGE_BOX_STYLE = me.Style(
    flex_grow=1,
    min_height=360,
    border_radius=12,
    display="flex",
    align_items="center",
    justify_content="center",
    background=me.theme_var("surface-container"),
    overflow="hidden",
)


def _controller() -> BackdropController:
    state = me.state(PageState)
    return BackdropController(state, SessionCredentialSelector(state))


def _model_display_name() -> str:
    model_config = get_gemini_image_model_config(cfg().GEMINI_IMAGE_GEN_MODEL)
    return model_config.display_name if model_config else cfg().GEMINI_IMAGE_GEN_MODEL


# Event handlers


def on_load(e: me.LoadEvent):
    """Assigns a session and checks for a selected API key."""
    app_state = me.state(AppState)
    if not app_state.session_id:
        app_state.session_id = str(uuid.uuid4())
    app_state.current_page = "styleswap"
    log_page_view("styleswap", app_state.session_id)
    _controller().check_credentials()
    yield


def on_api_key_blur(e: me.InputBlurEvent):
    me.state(PageState).api_key_input = e.value


@track_click(element_id="styleswap_connect_key_button")
def on_connect_key_click(e: me.ClickEvent):
    state = me.state(PageState)
    _controller().connect_api_key(state.api_key_input)
    state.api_key_input = ""
    yield


def on_upload(e: me.UploadEvent):
    """Reads the selected photo; a new photo always returns the page to idle."""
    controller = _controller()
    try:
        image = load_image(e.file)
    except BackdropError as ex:
        analytics_logger.error(f"Image intake failed: {ex.message}")
        controller.report_intake_error(ex)
        yield
        return
    controller.select_image(image)
    yield


def on_preset_click(e: me.ClickEvent):
    state = me.state(PageState)
    app_state = me.state(AppState)
    log_ui_click(
        element_id=f"styleswap_preset_{e.key}",
        page_name=app_state.current_page,
        session_id=app_state.session_id,
    )
    _controller().select_preset(e.key)
    state.custom_prompt_key += 1
    yield


def on_custom_prompt_blur(e: me.InputBlurEvent):
    _controller().set_custom_prompt(e.value)


@track_click(element_id="styleswap_transform_button")
def on_generate_click(e: me.ClickEvent):
    """Shows the spinner, then calls the model and renders the outcome."""
    controller = _controller()
    request = controller.begin_generation()
    if request is None:
        return
    yield
    controller.run_generation(request)
    yield


@track_click(element_id="styleswap_start_over_button")
def on_start_over_click(e: me.ClickEvent):
    state = me.state(PageState)
    _controller().reset()
    state.custom_prompt_key += 1
    yield


def on_download(e: me.WebEvent):
    app_state = me.state(AppState)
    log_ui_click(
        element_id="styleswap_download",
        page_name=app_state.current_page,
        session_id=app_state.session_id,
        extras={"file_name": e.value.get("fileName", "")},
    )


# Rendering


def onboarding():
    """Asks for a Gemini API key before the studio can be used."""
    state = me.state(PageState)
    with me.box(
        style=me.Style(
            min_height="100vh",
            display="flex",
            align_items="center",
            justify_content="center",
            background="#fff7ed",
            padding=me.Padding.all(16),
        )
    ):
        with me.box(
            style=me.Style(
                background="white",
                max_width=440,
                width="100%",
                padding=me.Padding.all(32),
                border_radius=24,
                text_align="center",
                display="flex",
                flex_direction="column",
                gap=16,
            )
        ):
            me.icon("key", style=me.Style(font_size=40, color=ACCENT, margin=me.Margin.symmetric(horizontal="auto")))
            me.text("Unlock Gemini 3", type="headline-5", style=me.Style(font_weight="bold"))
            me.text(
                f"StyleSwap uses the {_model_display_name()} model. "
                "To proceed, connect an API key from a paid Google Cloud project."
            )
            me.input(
                label="Gemini API key",
                type="password",
                value=state.api_key_input,
                on_blur=on_api_key_blur,
                style=me.Style(width="100%"),
            )
            me.button("Connect API Key", on_click=on_connect_key_click, type="flat")
            me.link(
                text="Learn about paid project keys",
                url=BILLING_DOCS_URL,
                open_in_new_tab=True,
                style=me.Style(color=ACCENT, font_size=14),
            )


def header():
    state = me.state(PageState)
    with me.box(
        style=me.Style(
            display="flex",
            align_items="center",
            justify_content="space-between",
            padding=me.Padding.symmetric(vertical=16, horizontal=32),
            border=me.Border(bottom=me.BorderSide(width=1, style="solid", color="#ffedd5")),
            margin=me.Margin(bottom=32),
        )
    ):
        with me.box(style=me.Style(display="flex", align_items="center", gap=12)):
            me.icon("auto_fix_high", style=me.Style(color=ACCENT, font_size=32))
            with me.box():
                me.text(cfg().APP_TITLE, type="headline-5", style=me.Style(font_weight="bold", margin=me.Margin.all(0)))
                me.text(
                    f"PRO EDIT · {_model_display_name()} API Active",
                    style=me.Style(font_size=10, font_weight="bold", color=ACCENT),
                )
        with me.box(style=me.Style(display="flex", align_items="center", gap=12)):
            if state.original_image_url:
                with me.content_button(on_click=on_start_over_click, type="stroked"):
                    with me.box(style=me.Style(display="flex", align_items="center", gap=6)):
                        me.icon("restart_alt")
                        me.text("Start Over")
            me.uploader(
                label="New Photo" if state.original_image_url else "Upload Photo",
                key=f"uploader-{state.uploader_key}",
                on_upload=on_upload,
                accepted_file_types=["image/*"],
                type="flat",
            )


def style_designer():
    """Left column: presets, custom setting and the transform button."""
    state = me.state(PageState)
    is_generating = state.status == AppStatus.GENERATING.value

    with me.box(style=CARD_STYLE):
        with me.box(style=me.Style(display="flex", align_items="center", gap=8, margin=me.Margin(bottom=16))):
            me.icon("tune", style=me.Style(color=ACCENT))
            me.text("AI Style Designer", type="headline-6", style=me.Style(font_weight="bold"))

        me.text("Atmosphere Presets", style=me.Style(font_weight="bold", font_size=14, margin=me.Margin(bottom=12)))
        with me.box(style=me.Style(display="grid", grid_template_columns="1fr 1fr", gap=12, margin=me.Margin(bottom=24))):
            for preset in BACKDROP_PRESETS:
                is_selected = preset.id == state.selected_preset_id and not state.custom_prompt
                with me.box(
                    key=preset.id,
                    on_click=on_preset_click,
                    style=me.Style(
                        display="flex",
                        flex_direction="column",
                        align_items="center",
                        gap=8,
                        padding=me.Padding.all(12),
                        border_radius=12,
                        cursor="pointer",
                        text_align="center",
                        background="#fff7ed" if is_selected else "transparent",
                        border=me.Border.all(
                            me.BorderSide(width=2, style="solid", color=ACCENT if is_selected else "#f3f4f6")
                        ),
                    ),
                ):
                    me.icon(preset.icon)
                    me.text(preset.name, style=me.Style(font_size=12, font_weight="medium"))

        me.textarea(
            label="Custom Setting",
            placeholder="Describe your perfect background...",
            key=f"custom-prompt-{state.custom_prompt_key}",
            rows=4,
            value=state.custom_prompt,
            on_blur=on_custom_prompt_blur,
            style=me.Style(width="100%", margin=me.Margin(bottom=16)),
        )

        with me.content_button(
            on_click=on_generate_click,
            type="flat",
            disabled=not state.original_image_url or is_generating,
            style=me.Style(width="100%", padding=me.Padding.all(12)),
        ):
            with me.box(style=me.Style(display="flex", align_items="center", justify_content="center", gap=8)):
                if is_generating:
                    me.progress_spinner(diameter=20, stroke_width=3)
                    me.text("Gemini 3 Processing...")
                else:
                    me.icon("auto_awesome")
                    me.text("Transform Backdrop")

        if state.error_message:
            with me.box(
                style=me.Style(
                    margin=me.Margin(top=12),
                    padding=me.Padding.all(12),
                    background="#fef2f2",
                    color="#dc2626",
                    border_radius=8,
                    font_size=12,
                    display="flex",
                    align_items="center",
                    gap=6,
                )
            ):
                me.icon("warning")
                me.text(state.error_message)


def preview():
    """Right column: the input photo and the generated output side by side."""
    state = me.state(PageState)

    with me.box(style=PREVIEW_CARD_STYLE):
        if not state.original_image_url:
            with me.box(
                style=me.Style(
                    flex_grow=1,
                    display="flex",
                    flex_direction="column",
                    align_items="center",
                    justify_content="center",
                    gap=12,
                    border=me.Border.all(me.BorderSide(width=2, style="dashed", color="#e5e7eb")),
                    border_radius=16,
                    padding=me.Padding.all(40),
                )
            ):
                me.icon("photo_camera", style=me.Style(font_size=48, color=ACCENT))
                me.text("Ready for Gemini 3 Transformation", type="headline-6", style=me.Style(font_weight="bold"))
                me.text(
                    "Upload a product photo to see how Gemini 3 reimagines its surroundings.",
                    style=me.Style(font_size=14, text_align="center"),
                )
            return

        with me.box(style=me.Style(display="flex", flex_direction="row", gap=24, flex_grow=1)):
            # Before
            with me.box(style=me.Style(flex_grow=1, flex_basis=0, display="flex", flex_direction="column", gap=12)):
                with me.box(style=me.Style(display="flex", align_items="center", justify_content="space-between")):
                    me.text("INPUT", style=_panel_label_style("#f3f4f6"))
                    if state.original_resolution:
                        me.text(state.original_resolution, style=me.Style(font_size=11))
                with me.box(style=PANEL_IMAGE_BOX_STYLE):
                    me.image(
                        src=state.original_image_url,
                        alt="Original",
                        style=me.Style(max_width="100%", max_height="100%", object_fit="contain"),
                    )

            # After
            with me.box(style=me.Style(flex_grow=1, flex_basis=0, display="flex", flex_direction="column", gap=12)):
                with me.box(style=me.Style(display="flex", align_items="center", justify_content="space-between")):
                    me.text(
                        "GEMINI 3 PRO OUTPUT",
                        style=_panel_label_style("#eff6ff", color="#2563eb"),
                    )
                    if state.status == AppStatus.SUCCESS.value and state.result_image_url:
                        download_button(
                            data_url=state.result_image_url,
                            file_prefix=cfg().DOWNLOAD_FILE_PREFIX,
                            on_download=on_download,
                        )
                with me.box(style=PANEL_IMAGE_BOX_STYLE):
                    if state.status == AppStatus.GENERATING.value:
                        with me.box(style=me.Style(display="flex", flex_direction="column", align_items="center", gap=12)):
                            me.progress_spinner()
                            me.text("Gemini 3 is creating...", style=me.Style(font_weight="bold", font_size=14))
                            me.text("Applying global lighting & depth maps", style=me.Style(font_size=11))
                    elif state.result_image_url:
                        me.image(
                            src=state.result_image_url,
                            alt="Transformed",
                            style=me.Style(max_width="100%", max_height="100%", object_fit="contain"),
                        )
                    else:
                        me.text("Awaiting AI transformation", style=me.Style(font_size=12, font_style="italic"))
                if state.status == AppStatus.SUCCESS.value and state.generation_time > 0:
                    me.text(f"{state.generation_time:.2f} seconds", style=me.Style(font_size=12))


def _panel_label_style(background: str, color: str | None = None) -> me.Style:
    return me.Style(
        background=background,
        color=color,
        font_size=10,
        font_weight="bold",
        letter_spacing="0.1em",
        padding=me.Padding.symmetric(vertical=4, horizontal=8),
        border_radius=4,
    )


def styleswap_page_content():
    state = me.state(PageState)
    if state.needs_api_key:
        onboarding()
        return

    with me.box(style=me.Style(min_height="100vh", padding=me.Padding(bottom=80))):
        header()
        with me.box(
            style=me.Style(
                display="flex",
                flex_direction="row",
                gap=32,
                max_width=1152,
                margin=me.Margin.symmetric(horizontal="auto"),
                padding=me.Padding.symmetric(horizontal=32),
            )
        ):
            with me.box(style=me.Style(width=380, flex_shrink=0)):
                style_designer()
            preview()


@me.page(
    path="/",
    title="StyleSwap - Gemini 3 Backdrop Studio",
    on_load=on_load,
    security_policy=me.SecurityPolicy(
        allowed_script_srcs=[
            "https://cdn.jsdelivr.net",  # Lit, for the download button
        ]
    ),
)
def page():
    """Define the Mesop page route for StyleSwap."""
    styleswap_page_content()
