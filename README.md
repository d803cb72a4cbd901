# dockman

Building blocks for a self-hosted dashboard that deploys and watches
containers. The package has no third-party dependencies and gathers:

- **An HTML element tree** (`dockman.ui.elements`): `tag`, `attr`,
  `Element`, `Raw` and `merge_classes`; elements render to HTML with
  `Element.render()` and can be inspected with `find_all`, `get` and
  `text_content`.
- **UI components** (`dockman.ui`): buttons with sizes, variants and a
  loading spinner (`button`), alerts and form errors (`alert`), tables
  filled row by row (`table`), link tabs that highlight the current path
  (`tabs`), run status indicators (`status`), a scrolling log view and its
  lines (`log`), sidebar sections (`sidebar`) and the logo (`logo`).
- **Page pieces** (`dockman.pages`): titles, step navigation, paragraphs
  and links (`base`), a websocket metrics list (`metrics`) and the interval
  job table with status, timing and pause/resume buttons (`jobs`).
- **Utilities** (`dockman.util`): SHA-256 hex hashing, index-aware mapping,
  polling with a timeout and minimum-duration calls (`helpers`), line
  reading (`fileio`), a small `key=value` file store (`filekv`), JSON and
  byte conversions (`serialization`), the persistent data directory and the
  outbound IP address (`paths`), and HTML sanitising (`sanitize`).
- **URLs** (`dockman.urls`): the dashboard's route builders.
- **Validators** (`dockman.validators`): `DockerfileValidator` checks that a
  Dockerfile exists in a checked-out repository and starts with a `FROM`
  line; `validate_all` runs several validators, stopping at the first
  `ValidationError`.
- **Load testing** (`dockman.loadtest`): many concurrent agents fetching
  random paths from a host for a fixed time.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Examples

Hashing and URLs:

```python
from dockman.util.helpers import hash_string
from dockman.urls import resource_url, repo_commit_hash_url

hash_string("hello")        # 64 hex characters of SHA-256
resource_url("abc")         # "/resource?id=abc"
repo_commit_hash_url("https://github.com/example/app", "0123abcd")
# "https://github.com/example/app/commit/0123abcd"
```

A key/value file, safe across threads sharing one lock:

```python
from dockman.util.filekv import FileLocker, read_key_values, write_key_value

lock = FileLocker()
write_key_value("settings.env", "region", "eu", lock)
read_key_values("settings.env")   # {"region": "eu"}
```

Checking a Dockerfile:

```python
from dockman.validators import DockerfileValidator, ValidationError

try:
    DockerfileValidator(dockerfile="Dockerfile", repository_dir="./checkout").validate()
except ValidationError as exc:
    print(exc)
```

Rendering components:

```python
from dockman.ui.button import ButtonProps, primary_button
from dockman.ui.table import Table

html = primary_button(ButtonProps(text="Deploy")).render()

table = Table()
table.add_columns(["Name", "Status"])
table.add_row()
table.with_cell_texts("web", "running")
print(table.render().render())
```

## Load testing

The `dockman-load` command runs the HTTP load tester:

```
dockman-load --hostname https://example.com --agents 10 --duration 30 / /docs
```

It prints progress every second and, when it finishes, a summary of
successful and failed requests and bytes read. The same run is available
from Python through `dockman.loadtest.run_load_test`, which also accepts a
`fetch` function in place of real HTTP requests and returns a `LoadStats`.

## What this package does not do

It builds HTML and checks inputs, but it runs no web server or websocket
endpoint, keeps no store of resources, servers or deployments, and does not
talk to Docker, to remote hosts over SSH or to git repositories. It has no
form input, select, checkbox, combo box, tooltip or icon components; the
sidebar, page and log pieces are the only ready-made screens.