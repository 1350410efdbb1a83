"""
Tests for the command line entry point.
"""

from main import build_parser, create_runner, main
from roshambo.strategies import STRATEGY_TYPES


class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.participants is None
        assert args.rounds == 100
        assert args.games == 10
        assert not args.training
        assert args.progress == 'print'

    def test_create_runner_registers_all_by_default(self):
        args = build_parser().parse_args(['--quiet'])
        runner = create_runner(args)
        assert [p.identity for p in runner.players] == list(STRATEGY_TYPES)

    def test_create_runner_config(self):
        args = build_parser().parse_args(
            ['-p', 'rock', 'paper', '-r', '7', '-g', '3', '--training', '--k-factor', '16']
        )
        runner = create_runner(args)
        assert runner.config.rounds == 7
        assert runner.config.games == 3
        assert runner.config.training
        assert runner.elo.k_factor == 16


class TestMain:
    """Tests for main()."""

    def test_list_strategies(self, capsys):
        assert main(['--list-strategies']) == 0
        out = capsys.readouterr().out
        for identity in STRATEGY_TYPES:
            assert identity in out

    def test_quiet_run(self, capsys):
        code = main(['-p', 'rock', 'paper', '-r', '3', '-g', '2', '-q'])
        out = capsys.readouterr().out
        assert code == 0
        assert "1. paper 2/2 games, 6/6 rounds" in out
        assert "2. rock 0/2 games, 0/6 rounds" in out

    def test_verbose_run_with_progress(self, capsys):
        code = main(['-p', 'rock', 'scissors', '-r', '2', '-g', '1', '--seed', '1'])
        out = capsys.readouterr().out
        assert code == 0
        assert "Tournament Progress: 0% 10%" in out
        assert "100%" in out
        assert "Nemesis" in out

    def test_repeat_with_training(self, capsys):
        code = main(['-p', 'frequency', 'cycle', '-r', '5', '-g', '2',
                     '--training', '--repeat', '2', '--progress', 'none'])
        out = capsys.readouterr().out
        assert code == 0
        assert "Tournament 2/2" in out

    def test_single_participant_fails(self, capsys):
        assert main(['-p', 'rock']) == 1
        assert "At least 2 players" in capsys.readouterr().err

    def test_duplicate_participant_fails(self, capsys):
        assert main(['-p', 'rock', 'rock']) == 1
        assert "already registered" in capsys.readouterr().err

    def test_unknown_participant_fails(self, capsys):
        assert main(['-p', 'rock', 'lizard']) == 1
        assert "Unknown strategy" in capsys.readouterr().err

    def test_bad_rounds_fails(self):
        assert main(['-p', 'rock', 'paper', '-r', '0']) == 1

    def test_bad_repeat_fails(self):
        assert main(['-p', 'rock', 'paper', '--repeat', '0']) == 1
