## tests for pydantic model fields of InputArg and OutputArg

from assertpy import assert_that
from pathlib import Path
from pytest import importorskip, mark, raises

from pylaborate.patharg import InputArg, OutputArg

pydantic = importorskip("pydantic")


class Job(pydantic.BaseModel):
    infile: InputArg
    outfile: OutputArg = OutputArg()


@mark.dependency
def test_to_json():
    job = Job(infile=InputArg(), outfile=OutputArg("out.txt"))
    assert_that(job.model_dump_json()).is_equal_to('{"infile":"-","outfile":"out.txt"}')
    job = Job(infile=InputArg("foo.txt"))
    assert_that(job.model_dump_json()).is_equal_to('{"infile":"foo.txt","outfile":"-"}')


def test_to_python():
    job = Job(infile=InputArg.from_path("-"))
    assert_that(job.model_dump()).is_equal_to({"infile": "-", "outfile": "-"})


@mark.dependency
def test_from_json():
    job = Job.model_validate_json('{"infile": "-", "outfile": "./-"}')
    assert_that(job.infile).is_equal_to(InputArg())
    assert_that(job.outfile).is_equal_to(OutputArg.from_path("./-"))
    assert_that(job.outfile.is_path()).is_true()


@mark.dependency(depends=["test_to_json", "test_from_json"])
def test_json_round_trip():
    for job in (Job(infile=InputArg()), Job(infile=InputArg("a b.txt"), outfile=OutputArg(""))):
        assert_that(Job.model_validate_json(job.model_dump_json())).is_equal_to(job)


def test_from_python():
    job = Job.model_validate({"infile": Path("in.txt"), "outfile": b"-"})
    assert_that(job.infile).is_equal_to(InputArg("in.txt"))
    assert_that(job.outfile.is_stdout()).is_true()
    arg = InputArg("x")
    assert_that(Job(infile=arg).infile).is_same_as(arg)


def test_invalid_values():
    with raises(pydantic.ValidationError):
        Job.model_validate({"infile": 42})
    with raises(pydantic.ValidationError):
        Job.model_validate_json('{"infile": 42}')
    with raises(pydantic.ValidationError):
        Job.model_validate_json('{"infile": null}')


def test_json_schema():
    schema = Job.model_json_schema()
    assert_that(schema["properties"]["infile"]["type"]).is_equal_to("string")
    assert_that(schema["required"]).is_equal_to(["infile"])


def test_validate():
    arg = OutputArg("out.txt")
    assert_that(OutputArg.validate(arg)).is_same_as(arg)
    assert_that(OutputArg.validate("-")).is_equal_to(OutputArg())
    assert_that(OutputArg.validate).raises(ValueError).when_called_with(3.5)
