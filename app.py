import gradio as gr

from json_node_editor.config import EditorConfig, setup_logging
from json_node_editor.handlers import (
    apply_raw_contents_handler,
    begin_edit_handler,
    cancel_edit_handler,
    export_document_handler,
    load_document_handler,
    save_edit_handler,
    select_node_handler,
)

# --- UI Definition ---
with gr.Blocks(title="JSON Node Editor") as demo:
    gr.Markdown("# JSON Node Editor")
    gr.Markdown("Upload a JSON file, pick a node by its path, and edit its values in place.")

    # State
    session_state = gr.State()

    with gr.Row():
        # Left Panel: Document
        with gr.Column(scale=1):
            gr.Markdown("### 1. Import")
            file_input = gr.File(label="Upload JSON File", file_types=[".json"])
            status_msg = gr.Textbox(label="Status", interactive=False)

            gr.Markdown("### 2. Document")
            document_view = gr.Code(label="Document", language="json", interactive=True)
            apply_raw_btn = gr.Button("Apply Document Text")

            gr.Markdown("### 4. Export")
            output_filename = gr.Textbox(label="Output Filename (optional)", placeholder="edited")
            export_btn = gr.Button("Export Document", variant="primary")
            download_output = gr.File(label="Download Result")

        # Right Panel: Node editor
        with gr.Column(scale=1):
            gr.Markdown("### 3. Edit Node")
            node_selector = gr.Dropdown(
                label="Node",
                choices=[],
                value=None,
                interactive=True,
            )
            content_view = gr.Code(label="Content", language="json", interactive=False)
            edit_box = gr.Textbox(label="Content", lines=4, max_lines=20, visible=False)
            with gr.Row():
                edit_btn = gr.Button("Edit", visible=False)
                save_btn = gr.Button("Save", variant="primary", visible=False)
                cancel_btn = gr.Button("Cancel", visible=False)
            path_view = gr.Code(label="JSON Path", language="json", value="$", interactive=False)

    view_outputs = [
        session_state,
        document_view,
        node_selector,
        content_view,
        edit_box,
        path_view,
        edit_btn,
        save_btn,
        cancel_btn,
        status_msg,
    ]

    file_input.upload(
        fn=load_document_handler,
        inputs=[file_input],
        outputs=view_outputs,
    )

    node_selector.input(
        fn=select_node_handler,
        inputs=[session_state, node_selector],
        outputs=view_outputs,
    )

    edit_btn.click(
        fn=begin_edit_handler,
        inputs=[session_state],
        outputs=view_outputs,
    )

    save_btn.click(
        fn=save_edit_handler,
        inputs=[session_state, edit_box],
        outputs=view_outputs,
    )

    cancel_btn.click(
        fn=cancel_edit_handler,
        inputs=[session_state],
        outputs=view_outputs,
    )

    apply_raw_btn.click(
        fn=apply_raw_contents_handler,
        inputs=[session_state, document_view],
        outputs=view_outputs,
    )

    export_btn.click(
        fn=export_document_handler,
        inputs=[session_state, output_filename],
        outputs=[download_output, status_msg],
    )

if __name__ == "__main__":
    setup_logging(EditorConfig().log_level)
    demo.launch()
