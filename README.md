# taskman

A small command-line to-do list. Tasks are stored in a JSON file and shown
as a table. `list` puts open tasks first and completed ones last, each
group sorted by title.

## Installation

```
pip install .
```

## The database file

The `taskman` command reads and writes the file
`internal/database/jsonstorage/data/db.json`, relative to the current
directory. The file must already exist and hold a JSON object. An empty
database can be as small as:

```
{"meta_info": {}, "tasks": []}
```

## Usage

Add a task:

```
taskman add -title "Buy milk"
```

List all tasks:

```
taskman list
```

Mark a task as completed, by its id:

```
taskman complete -id 1
```

Mark it as not completed again:

```
taskman complete -id 1 -u
```

The options can also be written with two dashes: `--title`, `--id`, `--u`.

Each command prints the affected tasks as a table with the columns
`ID`, `Completed` and `Title`. Completion is shown as a ☐ or ☑ checkbox.
When the output is a terminal, the header is green and underlined and
the id column is yellow.

A missing or unknown subcommand, an id that is not an integer, or a
database file that cannot be read makes `taskman` print an error to
standard error and exit with status 2.

## Storage format

The database is a JSON object holding a `meta_info` object
(`items_count`, `last_updated`, `max_id`) and a `tasks` list. Each task
records its `id`, `text`, `is_completed`, `created_at` and `updated_at`.
Timestamps are written as `YYYY-MM-DD HH:MM:SS`. Every write stamps
`meta_info.last_updated` with the current time. A new task gets the id
after the highest one already stored, so the first task is `1`.

## Library use

- `taskman.service.TasksService` wraps a storage backend and offers
  `get`, `get_all`, `put` and `mark_task`. `mark_task` takes the id as
  text and raises `ValueError` when it is not an integer.
- `taskman.jsonstorage.JsonStorage` keeps tasks in an existing JSON file.
  `taskman.storage.MemStorage` keeps them in memory, with ids starting
  at `0`, and also has `delete`. Both follow the `taskman.storage.Storage`
  interface.
- `taskman.entity.Task` is the task record, with `new`, `to_dict`,
  `from_dict` and `to_json`. `taskman.entity.id_from_string` parses an id.
- `taskman.printers.TablePrint` renders tasks as a table. Its `render`
  method returns the text, and its `color` argument forces colour on or off.
  `taskman.printers.PrettyPrint` writes tasks as indented JSON.
- `taskman.cli.TaskManager` ties a service and a printer together and runs
  the `list`, `add` and `complete` commands. It raises
  `taskman.cli.CommandError` for a missing or unknown subcommand.

## What it does not do

- There is no command to delete or rename a task.
- The database path cannot be chosen from the command line.
- The database file is not created when it is missing.

## Running the tests

```
pip install .[test]
pytest
```