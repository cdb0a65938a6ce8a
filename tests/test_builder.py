from dataclasses import dataclass, is_dataclass
from typing import List, Optional

import pytest

from structbuilder.builder import (
    Builder,
    BuilderAttributeError,
    BuilderError,
    builder,
    builder_field,
)


def _command_class():
    @dataclass
    class Command:
        executable: str
        args: list[str]
        env: list[str]
        current_dir: str

    return Command


def _opt_command_class():
    @dataclass
    class OptCommand:
        executable: str
        args: list[str]
        env: list[str]
        current_dir: Optional[str]

    return OptCommand


def _each_command_class():
    @dataclass
    class EachCommand:
        executable: str
        args: list[str] = builder_field(each="arg")
        env: list[str] = builder_field(each="env")
        current_dir: Optional[str] = None

    return EachCommand


def test_create_builder():
    Command = builder(_command_class())
    b = Command.builder()
    assert isinstance(b, Builder)
    assert type(b).__name__ == "CommandBuilder"


def test_setters_return_builder():
    Command = builder(_command_class())
    b = Command.builder()
    assert b.executable("cargo") is b
    assert b.args(["build", "--release"]) is b
    assert b.env([]) is b
    assert b.current_dir("..") is b


def test_call_build():
    Command = builder(_command_class())
    b = Command.builder()
    b.executable("cargo")
    b.args(["build", "--release"])
    b.env([])
    b.current_dir("..")
    command = b.build()
    assert command.executable == "cargo"
    assert command.args == ["build", "--release"]
    assert command.current_dir == ".."


def test_method_chaining():
    Command = builder(_command_class())
    command = (
        Command.builder()
        .executable("cargo")
        .args(["build", "--release"])
        .env([])
        .current_dir("..")
        .build()
    )
    assert command.executable == "cargo"


def test_missing_field_raises():
    Command = builder(_command_class())
    b = Command.builder().executable("cargo").args([]).env([])
    with pytest.raises(BuilderError, match="Could not build Command struct"):
        b.build()


def test_build_takes_values():
    Command = builder(_command_class())
    b = Command.builder().executable("cargo").args([]).env([]).current_dir("..")
    assert b.build().executable == "cargo"
    with pytest.raises(BuilderError):
        b.build()


def test_optional_field():
    OptCommand = builder(_opt_command_class())
    command = (
        OptCommand.builder()
        .executable("cargo")
        .args(["build", "--release"])
        .env([])
        .build()
    )
    assert command.current_dir is None

    command = (
        OptCommand.builder()
        .executable("cargo")
        .args(["build", "--release"])
        .env([])
        .current_dir("..")
        .build()
    )
    assert command.current_dir == ".."


def test_optional_string_annotations():
    class Job:
        name: "str"
        note: "str | None"
        tag: "Optional[int]"

    Job = builder(dataclass(Job))
    job = Job.builder().name("x").build()
    assert (job.name, job.note, job.tag) == ("x", None, None)


def test_repeated_field():
    EachCommand = builder(_each_command_class())
    command = (
        EachCommand.builder()
        .executable("cargo")
        .arg("build")
        .arg("--release")
        .build()
    )
    assert command.executable == "cargo"
    assert command.args == ["build", "--release"]
    assert command.env == []


def test_each_with_different_name_keeps_whole_setter():
    EachCommand = builder(_each_command_class())
    command = EachCommand.builder().executable("cargo").args(["a", "b"]).arg("c").build()
    assert command.args == ["a", "b", "c"]


def test_each_with_same_name_replaces_whole_setter():
    EachCommand = builder(_each_command_class())
    command = EachCommand.builder().executable("cargo").env("A=1").env("B=2").build()
    assert command.env == ["A=1", "B=2"]


def test_unrecognized_attribute():
    with pytest.raises(BuilderAttributeError, match="unsupported builder attribute"):
        builder_field(eac="arg")


def test_each_on_non_list_field():
    with pytest.raises(BuilderAttributeError, match="each functions"):

        @builder
        @dataclass
        class Bad:
            name: str = builder_field(each="letter")


def test_each_on_typing_list():
    @dataclass
    class Bag:
        items: List[int] = builder_field(each="item")

    Bag = builder(Bag)
    assert Bag.builder().item(1).item(2).build().items == [1, 2]


def test_redefined_prelude_names():
    Optional = ()  # noqa: F841
    Result = ()  # noqa: F841
    Box = ()  # noqa: F841

    @dataclass
    class Simple:
        executable: str

    Simple = builder(Simple)
    assert Simple.builder().executable("cargo").build().executable == "cargo"


def test_plain_class_becomes_dataclass():
    class Point:
        x: int
        y: int

    Point = builder(Point)
    point = Point.builder().x(1).y(2).build()
    assert is_dataclass(Point)
    assert (point.x, point.y) == (1, 2)


def test_empty_dataclass_builds():
    @dataclass
    class Unit:
        pass

    Unit = builder(Unit)
    assert Unit.builder().build() == Unit()