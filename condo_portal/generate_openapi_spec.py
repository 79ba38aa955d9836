import sys

import yaml

from condo_portal.main import app


def export_openapi(path: str = "openapi.yaml") -> dict:
    """Write the API's OpenAPI document to ``path`` as YAML for the browser client."""
    openapi_dict = app.openapi()
    with open(path, "w") as f:
        yaml.dump(openapi_dict, f, default_flow_style=False)
    return openapi_dict


if __name__ == "__main__":
    export_openapi(sys.argv[1] if len(sys.argv) > 1 else "openapi.yaml")
