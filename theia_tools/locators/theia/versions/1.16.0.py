"""Eclipse Theia 1.16.0: quick input moved to the VS Code widget."""

from theia_tools.locator_loader import By, has, text_of

diff = {
    "locators": {
        "components": {
            "workbench": {
                "input": {
                    "constructor": {
                        "locator": By.class_name("quick-input-widget"),
                        "properties": {
                            "title": text_of(By.class_name("quick-input-title")),
                        },
                    },
                    "message": {
                        "locator": By.id("quickInput_message"),
                    },
                },
            },
            "editor": {
                "content_assist": {
                    "constructor": {
                        "properties": {
                            "displayed": has("class", "visible"),
                        },
                    },
                },
            },
        },
        "widgets": {
            "monaco_scroll": {
                "item": {
                    "locator": By.css("[role='option']"),
                },
            },
        },
    },
}
