# clog

`clog` is a minimal implementation of the observer pattern. A subject keeps
a list of observers and notifies each of them when asked, in the order they
were attached. The package also ships a small workspace helper for installing
git hooks and a cargo coverage tool.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Using the observer pattern

The module `clog.observer` provides:

- `Observer`: an abstract base class with a single method, `update()`.
- `Subject`: holds attached observers.
  - `attach(observer)` appends an observer.
  - `detach(observer)` removes the first attached observer equal to the one
    given; detaching an observer that is not attached does nothing.
  - `notify_observers()` calls `update()` on every attached observer, in
    attachment order.
  - `observers` is a tuple of the attached observers; `len(subject)` and
    iterating over a subject work as well.
- `ConcreteObserver(id, stream=None)`: a dataclass observer. Each `update()`
  adds one to its `received` counter and writes
  `Observer id:<id> received event!` to `stream`, or to standard output when
  no stream is given. Two `ConcreteObserver`s are equal when their `id`s are.

```python
import io

from clog.observer import ConcreteObserver, Observer, Subject


class Recorder(Observer):
    def __init__(self):
        self.calls = 0

    def update(self):
        self.calls += 1


out = io.StringIO()
subject = Subject()
recorder = Recorder()
subject.attach(recorder)
subject.attach(ConcreteObserver(1, stream=out))

subject.notify_observers()   # recorder.calls == 1, one line written to out

subject.detach(recorder)
subject.notify_observers()   # only ConcreteObserver(1) is notified
```

## Demo

```
clog
```

runs `run_main()`, a short demonstration. It attaches two observers,
notifies them, detaches the second and notifies again:

```
Observer id:1 received event!
Observer id:2 received event!
Observer id:1 received event!
```

## Workspace helper

The module `clog.xtask` is run through the `clog-xtask` command:

```
clog-xtask install-hooks
clog-xtask install-tools
```

- `install-hooks` finds the project root by walking up from the current
  directory to the first one containing `Cargo.toml`, then, in name order,
  symlinks every entry of `.workspace/hooks` into `.git/hooks`, replacing any
  file already there. On Windows the files are copied instead. Each installed
  hook is reported on standard output.
- `install-tools` runs `cargo install cargo-llvm-cov` unless
  `cargo install --list` already mentions `cargo-llvm-cov`.

The same steps are available as functions: `project_root(start=None)`,
`install_hooks(root=None)` (returns the installed paths),
`is_tool_installed(tool_name)` and `install_tools()`. They raise
`XtaskError` when the project root cannot be found, when `cargo` cannot be
run, or when the installation fails.

If no command is given, the command is unknown, or a task fails, the helper
prints a message to standard error and exits with status 1; otherwise it
exits with status 0.

## What it does not do

The helper only installs hooks and the one coverage tool; it does not
create the `.workspace/hooks` directory, write hook scripts, or run
coverage itself.