"""Material-UI provider — component reference data and code templates."""

from __future__ import annotations

import json
from typing import Any

from mcp_pool.protocols.models import ResourceDescriptor, ToolCallResult, ToolDescriptor
from mcp_pool.providers.base import ResourceEntry, StaticProvider, ToolEntry, json_text
from mcp_pool.utils.timestamps import utc_timestamp

PROVIDER_NAME = "material-ui"

COMPONENTS: dict[str, dict[str, Any]] = {
    "Button": {
        "description": "Interactive button component with various styles and states",
        "props": ["variant", "color", "size", "disabled", "startIcon", "endIcon", "fullWidth"],
        "examples": [
            '<Button variant="contained" color="primary">Click me</Button>',
            '<Button variant="outlined" color="secondary" disabled>Disabled</Button>',
            '<Button variant="text" size="large" fullWidth>Full Width</Button>',
        ],
        "documentation": "https://mui.com/material-ui/react-button/",
    },
    "TextField": {
        "description": "Input field component for text data with validation and styling",
        "props": ["label", "variant", "value", "onChange", "placeholder", "type", "required", "error", "helperText"],
        "examples": [
            '<TextField label="Name" variant="outlined" />',
            '<TextField label="Email" type="email" required />',
            '<TextField label="Password" type="password" variant="filled" />',
        ],
        "documentation": "https://mui.com/material-ui/react-text-field/",
    },
    "Card": {
        "description": "Surface component for displaying content in contained format",
        "props": ["elevation", "variant", "sx"],
        "examples": [
            "<Card><CardContent>Basic card content</CardContent></Card>",
            '<Card elevation={3}><CardHeader title="Card Title" /></Card>',
            '<Card variant="outlined"><CardActions><Button>Action</Button></CardActions></Card>',
        ],
        "documentation": "https://mui.com/material-ui/react-card/",
    },
    "Typography": {
        "description": "Text display component with consistent theming and hierarchy",
        "props": ["variant", "color", "component", "align", "gutterBottom", "noWrap"],
        "examples": [
            '<Typography variant="h1">Main Heading</Typography>',
            '<Typography variant="body1" color="textSecondary">Body text</Typography>',
            '<Typography variant="caption" align="center">Caption text</Typography>',
        ],
        "documentation": "https://mui.com/material-ui/react-typography/",
    },
    "Box": {
        "description": "Layout component for styling, spacing, and responsive design",
        "props": ["sx", "component", "display", "flexDirection", "justifyContent", "alignItems"],
        "examples": [
            "<Box sx={{ padding: 2 }}>Content with padding</Box>",
            '<Box display="flex" justifyContent="center">Centered content</Box>',
            '<Box component="section" sx={{ backgroundColor: "primary.main" }}>Styled box</Box>',
        ],
        "documentation": "https://mui.com/system/react-box/",
    },
    "Grid": {
        "description": "Responsive layout component using CSS Grid and Flexbox",
        "props": ["container", "item", "xs", "sm", "md", "lg", "xl", "spacing", "direction"],
        "examples": [
            "<Grid container spacing={2}><Grid item xs={12}>Full width</Grid></Grid>",
            "<Grid container><Grid item xs={6}>Half width</Grid></Grid>",
            '<Grid container direction="column" spacing={1}>Vertical layout</Grid>',
        ],
        "documentation": "https://mui.com/material-ui/react-grid/",
    },
    "Paper": {
        "description": "Surface component that mimics physical paper with elevation",
        "props": ["elevation", "variant", "square", "sx"],
        "examples": [
            "<Paper elevation={1}>Basic paper</Paper>",
            '<Paper variant="outlined" square>Outlined square paper</Paper>',
            '<Paper sx={{ padding: 3, backgroundColor: "grey.100" }}>Styled paper</Paper>',
        ],
        "documentation": "https://mui.com/material-ui/react-paper/",
    },
    "Chip": {
        "description": "Compact component for tags, categories, or user input",
        "props": ["label", "variant", "color", "size", "onDelete", "onClick", "avatar", "icon"],
        "examples": [
            '<Chip label="Basic chip" />',
            "<Chip label=\"Deletable\" onDelete={() => {}} />",
            '<Chip label="Clickable" onClick={() => {}} color="primary" />',
        ],
        "documentation": "https://mui.com/material-ui/react-chip/",
    },
}

CATEGORIES = {
    "input": ["TextField", "Button"],
    "display": ["Typography", "Chip"],
    "layout": ["Box", "Grid", "Paper"],
    "surfaces": ["Card", "Paper"],
}

_FONT_FAMILY = '"Roboto", "Helvetica", "Arial", sans-serif'

DEFAULT_THEME = {
    "palette": {
        "mode": "light",
        "primary": {"main": "#1976d2"},
        "secondary": {"main": "#dc004e"},
        "error": {"main": "#d32f2f"},
        "warning": {"main": "#ed6c02"},
        "info": {"main": "#0288d1"},
        "success": {"main": "#2e7d32"},
    },
    "typography": {
        "fontFamily": _FONT_FAMILY,
        "h1": {"fontSize": "2.125rem"},
        "h2": {"fontSize": "1.5rem"},
        "body1": {"fontSize": "1rem"},
    },
    "spacing": 8,
    "breakpoints": {"xs": 0, "sm": 600, "md": 900, "lg": 1200, "xl": 1536},
}

INSTALLATION_GUIDE = """\
# Material-UI Installation Guide

## 1. Install Material-UI

```bash
npm install @mui/material @emotion/react @emotion/styled
```

## 2. Install Icon Package (Optional)

```bash
npm install @mui/icons-material
```

## 3. Setup Theme Provider

```jsx
import { ThemeProvider, createTheme } from '@mui/material/styles';
import CssBaseline from '@mui/material/CssBaseline';

const theme = createTheme({
  palette: {
    mode: 'light',
    primary: {
      main: '#1976d2',
    },
  },
});

function App() {
  return (
    <ThemeProvider theme={theme}>
      <CssBaseline />
      {/* Your app content */}
    </ThemeProvider>
  );
}
```

## 4. Import Components

```jsx
import { Button, TextField, Card } from '@mui/material';
```

## 5. Ready to Use!

Your Material-UI setup is complete. Start building beautiful React components!
"""

_COMPONENT_ARG = {
    "type": "string",
    "description": "Name of the Material-UI component",
    "enum": list(COMPONENTS),
}

TOOLS = [
    ToolDescriptor(
        name="generate_component",
        description="Generate Material-UI component code with specified props",
        input_schema={
            "type": "object",
            "properties": {
                "component": _COMPONENT_ARG,
                "props": {"type": "object", "description": "Props to apply to the component"},
                "children": {"type": "string", "description": "Content inside the component"},
                "typescript": {"type": "boolean", "description": "Generate TypeScript version", "default": False},
            },
            "required": ["component"],
        },
    ),
    ToolDescriptor(
        name="get_component_props",
        description="Get available props and documentation for a component",
        input_schema={
            "type": "object",
            "properties": {"component": _COMPONENT_ARG},
            "required": ["component"],
        },
    ),
    ToolDescriptor(
        name="create_theme",
        description="Generate a custom Material-UI theme configuration",
        input_schema={
            "type": "object",
            "properties": {
                "primaryColor": {"type": "string", "description": "Primary color for the theme", "default": "#1976d2"},
                "secondaryColor": {
                    "type": "string",
                    "description": "Secondary color for the theme",
                    "default": "#dc004e",
                },
                "mode": {"type": "string", "description": "Theme mode", "enum": ["light", "dark"], "default": "light"},
                "typography": {"type": "object", "description": "Typography customizations"},
            },
        },
    ),
    ToolDescriptor(
        name="generate_form",
        description="Generate a complete form using Material-UI components",
        input_schema={
            "type": "object",
            "properties": {
                "fields": {
                    "type": "array",
                    "description": "Array of form fields",
                    "items": {
                        "type": "object",
                        "properties": {
                            "name": {"type": "string"},
                            "label": {"type": "string"},
                            "type": {"type": "string"},
                            "required": {"type": "boolean"},
                        },
                    },
                },
                "submitLabel": {"type": "string", "description": "Submit button label", "default": "Submit"},
            },
            "required": ["fields"],
        },
    ),
    ToolDescriptor(
        name="search_components",
        description="Search for Material-UI components by functionality",
        input_schema={
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "Search query for component functionality"},
                "category": {
                    "type": "string",
                    "description": "Component category",
                    "enum": ["input", "display", "layout", "navigation", "feedback"],
                },
            },
            "required": ["query"],
        },
    ),
]

RESOURCES = [
    ResourceDescriptor(
        uri="material-ui://components",
        name="Material-UI Components",
        description="Complete list of available Material-UI components",
    ),
    ResourceDescriptor(
        uri="material-ui://theme",
        name="Default Theme Configuration",
        description="Default Material-UI theme structure and values",
    ),
    ResourceDescriptor(
        uri="material-ui://examples",
        name="Component Examples",
        description="Code examples for all components",
    ),
    ResourceDescriptor(
        uri="material-ui://installation",
        name="Installation Guide",
        description="How to install and setup Material-UI",
        mime_type="text/markdown",
    ),
]


def _render_prop(key: str, value: Any) -> str:
    if isinstance(value, bool):
        return key if value else ""
    if isinstance(value, str):
        return f'{key}="{value}"'
    return f"{key}={{{json.dumps(value)}}}"


def _ts_type(value: Any) -> str:
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int | float):
        return "number"
    if isinstance(value, str):
        return "string"
    return "object"


class MaterialUIProvider(StaticProvider):
    """Material-UI component reference and code generator."""

    def __init__(self) -> None:
        handlers = {
            "generate_component": self.generate_component,
            "get_component_props": self.get_component_props,
            "create_theme": self.create_theme,
            "generate_form": self.generate_form,
            "search_components": self.search_components,
        }
        readers = {
            "material-ui://components": self._read_components,
            "material-ui://theme": self._read_theme,
            "material-ui://examples": self._read_examples,
            "material-ui://installation": lambda: INSTALLATION_GUIDE,
        }
        super().__init__(
            PROVIDER_NAME,
            tools=[ToolEntry(tool, handlers[tool.name]) for tool in TOOLS],
            resources=[ResourceEntry(res, readers[res.uri]) for res in RESOURCES],
        )

    # -- tools ---------------------------------------------------------------

    async def generate_component(self, args: dict[str, Any]) -> ToolCallResult:
        component = args["component"]
        props: dict[str, Any] = args.get("props") or {}
        children = args.get("children", "")
        typescript = bool(args.get("typescript", False))

        props_string = " ".join(filter(None, (_render_prop(k, v) for k, v in props.items())))
        opening = f"{component} {props_string}" if props_string else component
        code = f"<{opening}>{children}</{component}>"
        import_statement = f"import {{ {component} }} from '@mui/material';"

        text = (
            f"🎨 Generated {component} component!\n\n"
            f"**Import:**\n```jsx\n{import_statement}\n```\n\n"
            f"**Component:**\n```jsx\n{code}\n```"
        )
        if typescript:
            fields = "\n".join(f"  {key}?: {_ts_type(value)};" for key, value in props.items())
            text += (
                "\n\n**TypeScript Types:**\n```typescript\n"
                f"// TypeScript Props Interface\ninterface {component}Props {{\n{fields}\n}}\n```"
            )
        return ToolCallResult.from_text(text)

    async def get_component_props(self, args: dict[str, Any]) -> ToolCallResult:
        component = args["component"]
        data = COMPONENTS[component]
        props = "\n".join(f"• {prop}" for prop in data["props"])
        examples = "\n\n".join(data["examples"])
        return ToolCallResult.from_text(
            f"📋 {component} Component Documentation\n\n"
            f"**Description:**\n{data['description']}\n\n"
            f"**Available Props:**\n{props}\n\n"
            f"**Examples:**\n```jsx\n{examples}\n```\n\n"
            f"**Documentation:** {data['documentation']}"
        )

    async def create_theme(self, args: dict[str, Any]) -> ToolCallResult:
        theme = {
            "palette": {
                "mode": args.get("mode", "light"),
                "primary": {"main": args.get("primaryColor", "#1976d2")},
                "secondary": {"main": args.get("secondaryColor", "#dc004e")},
            },
            "typography": {"fontFamily": _FONT_FAMILY, **(args.get("typography") or {})},
            "spacing": 8,
        }
        theme_code = (
            "import { createTheme } from '@mui/material/styles';\n\n"
            f"const theme = createTheme({json.dumps(theme, indent=2)});\n\n"
            "export default theme;"
        )
        usage = (
            "import { ThemeProvider } from '@mui/material/styles';\n"
            "import theme from './theme';\n\n"
            "function App() {\n  return (\n    <ThemeProvider theme={theme}>\n"
            "      {/* Your app */}\n    </ThemeProvider>\n  );\n}"
        )
        return ToolCallResult.from_text(
            f"🎨 Custom Material-UI Theme Generated!\n\n```javascript\n{theme_code}\n```\n\n"
            f"**Usage:**\n```jsx\n{usage}\n```"
        )

    async def generate_form(self, args: dict[str, Any]) -> ToolCallResult:
        submit_label = args.get("submitLabel", "Submit")
        rendered = []
        for field in args["fields"]:
            required = "required" if field.get("required") else ""
            rendered.append(
                "    <TextField\n"
                f"      name=\"{field.get('name', '')}\"\n"
                f"      label=\"{field.get('label', '')}\"\n"
                f"      type=\"{field.get('type', 'text')}\"\n"
                f"      {required}\n"
                "      fullWidth\n"
                "      margin=\"normal\"\n"
                "    />"
            )
        form_fields = "\n".join(rendered)
        form_code = (
            "import { Box, TextField, Button } from '@mui/material';\n\n"
            "function MyForm() {\n"
            "  const handleSubmit = (event) => {\n"
            "    event.preventDefault();\n"
            "    // Handle form submission\n"
            "  };\n\n"
            "  return (\n"
            "    <Box component=\"form\" onSubmit={handleSubmit} sx={{ mt: 1 }}>\n"
            f"{form_fields}\n"
            "      <Button\n"
            "        type=\"submit\"\n"
            "        fullWidth\n"
            "        variant=\"contained\"\n"
            "        sx={{ mt: 3, mb: 2 }}\n"
            "      >\n"
            f"        {submit_label}\n"
            "      </Button>\n"
            "    </Box>\n"
            "  );\n"
            "}\n\n"
            "export default MyForm;"
        )
        return ToolCallResult.from_text(f"📝 Generated Material-UI Form!\n\n```jsx\n{form_code}\n```")

    async def search_components(self, args: dict[str, Any]) -> ToolCallResult:
        query = args["query"]
        needle = query.lower()
        matches = [
            (name, data)
            for name, data in COMPONENTS.items()
            if needle in name.lower() or needle in data["description"].lower()
        ]
        listing = "\n\n".join(
            f"**{name}**\n{data['description']}\n📖 {data['documentation']}" for name, data in matches
        )
        return ToolCallResult.from_text(
            f'🔍 Search Results for "{query}"\n\n{len(matches)} components found:\n\n{listing}'
        )

    # -- resources -----------------------------------------------------------

    def _read_components(self) -> str:
        return json_text(
            {
                "components": COMPONENTS,
                "count": len(COMPONENTS),
                "categories": CATEGORIES,
                "timestamp": utc_timestamp(),
            }
        )

    def _read_theme(self) -> str:
        return json_text({"theme": DEFAULT_THEME, "timestamp": utc_timestamp()})

    def _read_examples(self) -> str:
        examples = {
            name: {
                "description": data["description"],
                "examples": data["examples"],
                "documentation": data["documentation"],
            }
            for name, data in COMPONENTS.items()
        }
        return json_text({"examples": examples, "timestamp": utc_timestamp()})
