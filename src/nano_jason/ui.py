import gradio as gr
import os
import tempfile
from loguru import logger
from .exceptions import NanoJasonError
from .modes import MODES
from .records import JasonFormat
from .sdk import NanoJasonSDK


def process_text(sdk: NanoJasonSDK, mode: str, text: str, output_dir: str = None):
    """
    Runs one mode and returns the values shown in the UI:
    (rewritten text, score, tips, jason document, notes, download path)
    """
    record = sdk.run(mode, text)
    output_dir = output_dir or os.path.join(tempfile.gettempdir(), "nano_jason")
    download_path = sdk.save(record, output_dir, mode=mode)

    if isinstance(record, JasonFormat):
        is_valid, errors = sdk.validate(record)
        facets = (
            f"Style: {record.style}\nMood: {record.mood}\n"
            f"Characters: {', '.join(record.characters) or '-'}\n"
            f"Items: {', '.join(record.items) or '-'}\n"
            f"Setting: {record.setting or '-'}\nAction: {record.action or '-'}\n"
            f"Colors: {', '.join(record.color_palette) or '-'}\n"
            f"Composition: {record.composition or '-'}\nLighting: {record.lighting or '-'}"
        )
        notes = "Valid" if is_valid else "\n".join(errors)
        return facets, None, "", record.jason_text, notes, download_path

    if mode == "technical":
        rewritten = record.nano_coder_prompt
        applied = record.technical_specifications + record.code_context
    else:
        rewritten = record.nano_prompt
        applied = record.optimizations_applied
    return (
        rewritten,
        record.accuracy_score,
        "\n".join(f"- {tip}" for tip in record.performance_tips),
        record.jason_format,
        "\n".join(applied),
        download_path,
    )


def create_interface(seed=None):
    sdk = NanoJasonSDK(seed=seed)

    def make_handler(mode):
        def handler(text):
            try:
                return process_text(sdk, mode, text)
            except NanoJasonError as e:
                logger.warning(f"{mode} request rejected: {e.message}")
                raise gr.Error(e.message)
        return handler

    def make_template_loader(mode):
        def loader(name):
            if not name:
                return ""
            return sdk.template(mode, name)
        return loader

    with gr.Blocks(title="NanoJason") as demo:
        gr.Markdown("# NanoJason\nUniversal AI Prompt Language Translator & Optimizer")

        with gr.Tabs():
            for mode, config in MODES.items():
                with gr.TabItem(config.title):
                    with gr.Row():
                        with gr.Column(scale=1):
                            template = gr.Dropdown(
                                choices=list(config.templates),
                                value=None,
                                label="Quick Templates"
                            )
                            text_input = gr.Textbox(label="Describe what you want to create", lines=5)
                            submit_btn = gr.Button(f"Run {config.title}", variant="primary")

                        with gr.Column(scale=2):
                            rewritten = gr.Textbox(label="Detected facets" if mode == "general" else "Optimized prompt", lines=5)
                            score = gr.Number(label="Accuracy score", visible=config.scored)
                            tips = gr.Textbox(label="Performance tips", visible=config.scored, lines=4)
                            jason = gr.Code(label="Jason format", language="json", lines=15)
                            notes = gr.Textbox(label="Validation" if mode == "general" else "Optimizations applied", lines=4)
                            download = gr.File(label="Download (.json)")

                    template.change(fn=make_template_loader(mode), inputs=[template], outputs=[text_input])
                    submit_btn.click(
                        fn=make_handler(mode),
                        inputs=[text_input],
                        outputs=[rewritten, score, tips, jason, notes, download]
                    )

    return demo
