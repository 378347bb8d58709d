import config
from main import build_parser, main


def test_parser_defaults_come_from_config():
    args = build_parser().parse_args([])
    assert args.p == config.EXAMPLE_P
    assert args.q == config.EXAMPLE_Q
    assert args.seed == config.EXAMPLE_SEED
    assert args.bits == config.DEFAULT_NUM_BITS
    assert args.rounds == config.MILLER_RABIN_ROUNDS
    assert args.seeds is None


def test_example_parameters_are_blum_form():
    assert config.EXAMPLE_P % 4 == 3
    assert config.EXAMPLE_Q % 4 == 3
    assert config.EXAMPLE_P != config.EXAMPLE_Q


def test_single_run_output(capsys):
    assert main(["--p", "11", "--q", "23", "--seed", "5", "--bits", "5"]) == 0
    out = capsys.readouterr().out
    assert "GCD of (p-3)/2, (q-3)/2 is: 2" in out
    assert "Generated BBS Random Bits: [True, True, False, True, False]" in out
    assert "As an Array of Integers (0 and 1): [1, 1, 0, 1, 0]" in out
    assert "As a Random Integer: 26" in out


def test_parallel_run_output(capsys):
    assert main(["--p", "11", "--q", "23", "--seeds", "5", "5", "--bits", "5", "--workers", "2"]) == 0
    out = capsys.readouterr().out
    assert out.count("seed=5: bits=11010 integer=26") == 2


def test_invalid_params_exit_code(capsys):
    assert main(["--p", "7", "--q", "11", "--seed", "7", "--bits", "5"]) == 1
    out = capsys.readouterr().out
    assert "[ERROR]" in out
    assert "seed_not_coprime" in out


def test_invalid_bit_count_exit_code(capsys):
    assert main(["--p", "11", "--q", "23", "--seed", "5", "--bits", "0"]) == 1
    assert "invalid_bit_count" in capsys.readouterr().out
