import logging
from functools import partial

import gradio as gr

from shopify_schema_generator.config import settings
from shopify_schema_generator.fields import (
    FIELD_TYPES,
    add_field,
    field_type_label,
    format_default_for_input,
    remove_field,
)
from shopify_schema_generator.handlers import (
    COPY_LABEL,
    FLASH_LISTENER_OPTIONS,
    handle_copy_ack,
    handle_delete_project,
    handle_download,
    handle_field_change,
    handle_load_project,
    handle_new_project,
    handle_save_project,
    project_summary,
    refresh_documents,
)
from shopify_schema_generator.repository import ProjectRepository
from shopify_schema_generator.storage import FileStorage

logging.basicConfig(level=settings.log_level)

repository = ProjectRepository(FileStorage(settings.storage_dir), key=settings.projects_key)

COPY_JS = "(text) => { navigator.clipboard.writeText(text); return text; }"

# --- UI Definition ---
with gr.Blocks(title=settings.app_title) as demo:
    gr.Markdown(f"# {settings.app_title}")

    # State
    fields_state = gr.State(value=[])
    projects_state = gr.State(value=[])

    with gr.Row():
        new_project_btn = gr.Button("New Project")
        open_project_btn = gr.Button("Open Project")
        save_project_btn = gr.Button("Save Project", variant="primary")
    status_msg = gr.Markdown()

    # Saved projects panel
    with gr.Column(visible=False) as projects_panel:
        with gr.Row():
            gr.Markdown("### Saved Projects")
            close_projects_btn = gr.Button("Close", size="sm", scale=0)
        create_project_btn = gr.Button("Create New Project")

        @gr.render(inputs=[projects_state])
        def render_projects(projects):
            if not projects:
                gr.Markdown("No saved projects yet.")
                return

            for project in projects:
                with gr.Row():
                    gr.Markdown(project_summary(project))
                    load_btn = gr.Button("Load", size="sm", scale=0)
                    delete_btn = gr.Button("Delete", variant="stop", size="sm", scale=0)
                load_btn.click(
                    fn=partial(handle_load_project, project_id=project.get("id")),
                    inputs=[projects_state],
                    outputs=[name_input, fields_state, projects_panel],
                )
                delete_btn.click(
                    fn=partial(handle_delete_project, repository, project_id=project.get("id")),
                    inputs=[projects_state],
                    outputs=[projects_state],
                )

    with gr.Row():
        # Left Panel: Section & Fields
        with gr.Column(scale=1):
            name_input = gr.Textbox(label="Section Name", value=settings.default_project_name)

            with gr.Row():
                gr.Markdown("### Fields")
                add_field_btn = gr.Button("Add Field", size="sm", scale=0)

            @gr.render(inputs=[fields_state])
            def render_fields(fields):
                if not fields:
                    gr.Markdown("No fields yet.")
                    return

                for index, field in enumerate(fields):
                    with gr.Group():
                        with gr.Row():
                            gr.Markdown(f"**Field {index + 1}**")
                            remove_btn = gr.Button("Remove", variant="stop", size="sm", scale=0)
                        type_input = gr.Dropdown(
                            label="Type",
                            choices=[(field_type_label(t), t) for t in FIELD_TYPES],
                            value=field.get("type"),
                            allow_custom_value=True,
                            interactive=True,
                        )
                        id_input = gr.Textbox(label="ID", value=field.get("id", ""))
                        label_input = gr.Textbox(label="Label", value=field.get("label", ""))
                        default_input = gr.Textbox(label="Default Value", value=format_default_for_input(field.get("default")))
                        info_input = gr.Textbox(label="Info Text", value=field.get("info") or "")

                    remove_btn.click(fn=partial(remove_field, index=index), inputs=[fields_state], outputs=[fields_state])
                    type_input.input(
                        fn=partial(handle_field_change, index=index, key="type"),
                        inputs=[fields_state, type_input],
                        outputs=[fields_state],
                    )
                    for key, box in (("id", id_input), ("label", label_input), ("default", default_input), ("info", info_input)):
                        on_edit = partial(handle_field_change, index=index, key=key)
                        box.blur(fn=on_edit, inputs=[fields_state, box], outputs=[fields_state])
                        box.submit(fn=on_edit, inputs=[fields_state, box], outputs=[fields_state])

        # Right Panel: Generated documents
        with gr.Column(scale=1):
            with gr.Row():
                gr.Markdown("### Schema")
                schema_download_btn = gr.Button("Download", size="sm", scale=0)
                schema_copy_btn = gr.Button(COPY_LABEL, size="sm", scale=0)
            schema_output = gr.Code(language="json", interactive=False, label="Schema")
            schema_file = gr.File(label="Schema File")

            with gr.Row():
                gr.Markdown("### Locales (en.default.json)")
                locales_download_btn = gr.Button("Download", size="sm", scale=0)
                locales_copy_btn = gr.Button(COPY_LABEL, size="sm", scale=0)
            locales_output = gr.Code(language="json", interactive=False, label="Locales")
            locales_file = gr.File(label="Locales File")

    demo.load(fn=repository.load, outputs=[projects_state])
    demo.load(fn=refresh_documents, inputs=[name_input, fields_state], outputs=[schema_output, locales_output])

    name_input.change(
        fn=refresh_documents,
        inputs=[name_input, fields_state],
        outputs=[schema_output, locales_output],
    )
    fields_state.change(
        fn=refresh_documents,
        inputs=[name_input, fields_state],
        outputs=[schema_output, locales_output],
    )

    add_field_btn.click(fn=add_field, inputs=[fields_state], outputs=[fields_state])

    new_project_outputs = [name_input, fields_state, projects_panel, status_msg]
    new_project_btn.click(fn=handle_new_project, outputs=new_project_outputs, **FLASH_LISTENER_OPTIONS)
    create_project_btn.click(fn=handle_new_project, outputs=new_project_outputs, **FLASH_LISTENER_OPTIONS)

    open_project_btn.click(fn=lambda: gr.update(visible=True), outputs=[projects_panel])
    close_projects_btn.click(fn=lambda: gr.update(visible=False), outputs=[projects_panel])

    save_project_btn.click(
        fn=partial(handle_save_project, repository),
        inputs=[projects_state, name_input, fields_state],
        outputs=[projects_state, status_msg],
        **FLASH_LISTENER_OPTIONS,
    )

    schema_download_btn.click(
        fn=partial(handle_download, kind="schema"),
        inputs=[name_input, fields_state],
        outputs=[schema_file],
    )
    locales_download_btn.click(
        fn=partial(handle_download, kind="locales"),
        inputs=[name_input, fields_state],
        outputs=[locales_file],
    )

    schema_copy_btn.click(fn=handle_copy_ack, inputs=[schema_output], outputs=[schema_copy_btn], js=COPY_JS, **FLASH_LISTENER_OPTIONS)
    locales_copy_btn.click(fn=handle_copy_ack, inputs=[locales_output], outputs=[locales_copy_btn], js=COPY_JS, **FLASH_LISTENER_OPTIONS)

if __name__ == "__main__":
    demo.launch(server_name=settings.server_name, server_port=settings.server_port)
