"""A real-coded genetic algorithm run repeatedly over the numbered benchmark functions.

Each experiment runs several independent trials of one benchmark, prints one
line per trial and writes per-trial, summary and convergence files.
"""

from __future__ import annotations

import argparse
import math
import random
import sys
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace
from pathlib import Path

from dstructs.lowdim import benchmark

NVARS = 30
"""Default number of problem variables."""

_NOISY = {7, 25}

_RESULT_HEADER = (
    "Fno\t[low,up]\tnvars\tpop\tpx\tpm\tTRIALNo\tmaxEval\tError\tbest\tworst\tmean\t"
    "stdev\tavgEval\tavgGen\tavgEEr\tavgGEr\t%ok\tavgTT(sec)\tavgRT(sec)\tavgET(sec)\n"
)

# number: (max evaluations, best known value, variables, eval step, error override)
_SETTINGS: dict[int, tuple[int, float, int, int, float | None]] = {
    1: (1000000, 0.0, NVARS, 10000, None),
    2: (150000, 0.0, NVARS, 10000, None),
    3: (500000, 0.0, NVARS, 10000, None),
    4: (500000, 0.0, NVARS, 10000, None),
    5: (2000000, 0.0, NVARS, 10000, None),
    6: (100000, 0.0, NVARS, 100, None),
    7: (300000, 0.0, NVARS, 10000, None),
    8: (500000, -12569.5 * NVARS / 30.0, NVARS, 10000, None),
    9: (500000, 0.0, NVARS, 10000, None),
    10: (500000, 0.0, NVARS, 10000, None),
    11: (500000, 0.0, NVARS, 10000, None),
    12: (500000, 0.0, NVARS, 10000, None),
    13: (500000, 0.0, NVARS, 10000, None),
    14: (10000, 0.998, 2, 10000, None),
    15: (400000, 0.0003074862, 4, 10000, None),
    16: (10000, -1.0316285, 2, 10000, None),
    17: (10000, 0.397887, 2, 10000, None),
    18: (10000, -10.1532, 4, 10000, None),
    19: (10000, -10.40294, 4, 10000, None),
    20: (10000, -10.53641, 4, 10000, None),
    21: (300000, -99.2784, 100, 10000, 4.7),
    22: (300000, -78.33236, 100, 10000, 0.015),
}


@dataclass(frozen=True)
class GAConfig:
    """Parameters shared by every trial of an experiment."""

    pop_size: int = 100
    trials: int = 3
    tournament_size: int = 6
    crossover_rate: float = 0.85
    mutation_rate: float = 0.02
    error: float = 0.1


@dataclass(frozen=True)
class Problem:
    """A benchmark to minimise, with its budget and variable bounds."""

    number: int
    func: Callable[..., float]
    nvars: int
    max_evals: int
    best_known: float = 0.0
    eval_step: int = 10000
    error: float | None = None
    bounds: tuple[tuple[float, float], ...] = ()
    noisy: bool = False


@dataclass
class Individual:
    """A point in the search space and its objective value (lower is better)."""

    x: list[float]
    fitness: float = math.inf

    def copy(self) -> Individual:
        return Individual(list(self.x), self.fitness)


@dataclass(frozen=True)
class TrialResult:
    """Outcome of one independent run."""

    trial: int
    best_value: float
    best_eval: int
    best_gen: int
    err_eval: int
    err_gen: int
    success: bool
    total_time: float
    result_time: float
    err_time: float
    step_values: tuple[float, ...] = ()


@dataclass(frozen=True)
class ExperimentSummary:
    """Statistics over all trials of an experiment."""

    best: float
    worst: float
    mean: float
    stdev: float
    mean_eval: int
    mean_gen: int
    mean_err_eval: int
    mean_err_gen: int
    success_percent: int
    avg_total_time: float
    avg_result_time: float
    avg_err_time: float
    step_avg: tuple[float, ...] = field(default_factory=tuple)
    step_best: tuple[float, ...] = field(default_factory=tuple)


def problem_settings(number: int) -> Problem:
    """Return the budget and known optimum of benchmark ``number`` (1 to 22), without bounds."""
    try:
        max_evals, best_known, nvars, eval_step, error = _SETTINGS[number]
    except KeyError:
        raise ValueError(f"Cannot find f{number}......") from None
    return Problem(
        number=number,
        func=benchmark(number),
        nvars=nvars,
        max_evals=max_evals,
        best_known=best_known,
        eval_step=eval_step,
        error=error,
        noisy=number in _NOISY,
    )


def read_bounds(path: str | Path, nvars: int) -> tuple[tuple[float, float], ...]:
    """Read ``nvars`` pairs of lower and upper bounds from a whitespace-separated file."""
    tokens = Path(path).read_text().split()
    needed = 2 * nvars
    if len(tokens) < needed:
        raise ValueError(f"{path}: expected {needed} numbers, found {len(tokens)}")
    try:
        values = [float(token) for token in tokens[:needed]]
    except ValueError as exc:
        raise ValueError(f"{path}: {exc}") from None
    return tuple(zip(values[0::2], values[1::2]))


class GeneticAlgorithm:
    """Roulette selection, one-point crossover, uniform mutation and elitism."""

    def __init__(self, problem: Problem, config: GAConfig | None = None,
                 rng: random.Random | None = None) -> None:
        if len(problem.bounds) != problem.nvars:
            raise ValueError(
                f"problem has {problem.nvars} variables but {len(problem.bounds)} bounds")
        self.problem = problem
        self.config = config or GAConfig()
        self.rng = rng or random.Random()
        self.population: list[Individual] = []
        self.best: Individual | None = None
        self.best_value = math.inf
        self.best_gen = 0
        self.best_eval = 0
        self.count_eval = 0
        self.generation = 1
        self.err_eval = 0
        self.err_gen = 0
        self.within_error = False
        self.step_values: list[float] = []
        self._start = 0.0
        self._finish = 0.0
        self._err_time = 0.0

    @property
    def error(self) -> float:
        """Distance from the best known value that counts as success."""
        return self.problem.error if self.problem.error is not None else self.config.error

    def _random_value(self, var: int) -> float:
        low, high = self.problem.bounds[var]
        return self.rng.random() * (high - low) + low

    def evaluate(self, individual: Individual) -> float:
        """Compute, store and return the fitness of ``individual``, counting the call.

        Every ``eval_step`` evaluations the best value so far is recorded.
        """
        self.count_eval += 1
        if self.problem.noisy:
            fitness = self.problem.func(individual.x, self.rng)
        else:
            fitness = self.problem.func(individual.x)
        if self.count_eval % self.problem.eval_step == 0:
            self.step_values.append(self.best_value)
        individual.fitness = fitness
        return fitness

    def _initialize(self) -> None:
        n = self.config.pop_size
        columns = [[self._random_value(var) for _ in range(n)]
                   for var in range(self.problem.nvars)]
        self.population = [Individual([col[j] for col in columns]) for j in range(n)]

    def _evaluate_population(self) -> None:
        for individual in self.population:
            self.evaluate(individual)

    def _check_error(self, generation: int) -> None:
        if not self.within_error and abs(self.best_value - self.problem.best_known) < self.error:
            self._err_time = self._finish - self._start
            self.err_gen = generation
            self.err_eval = self.count_eval
            self.within_error = True

    def _record_best(self, individual: Individual) -> None:
        self._finish = time.perf_counter()
        self.best = individual.copy()
        self.best_value = self.best.fitness
        self.best_gen = self.generation
        self.best_eval = self.count_eval

    def _keep_the_best(self) -> None:
        best = self.population[0]
        for individual in self.population[1:]:
            if individual.fitness < best.fitness:
                best = individual
        self._record_best(best)
        self._check_error(self.generation)

    def roulette_select(self) -> None:
        """Replace the population by roulette-wheel draws weighted ``exp(f - best)``.

        A draw that falls past the end of the wheel takes the best so far.
        """
        if self.best is None:
            raise RuntimeError("no best individual yet; run a trial first")
        weights = []
        for individual in self.population:
            try:
                weights.append(math.exp(individual.fitness - self.best.fitness))
            except OverflowError:
                weights.append(math.inf)
        total = sum(weights)
        probs = [w / total for w in weights] if total > 0 else [0.0] * len(weights)
        chosen = []
        for _ in self.population:
            q = self.rng.random()
            running = 0.0
            pick = self.best
            for individual, prob in zip(self.population, probs):
                running += prob
                if q < running:
                    pick = individual
                    break
            chosen.append(pick.copy())
        self.population = chosen

    def tournament_select(self) -> None:
        """Replace each member by the one with the largest fitness among random picks."""
        n = len(self.population)
        chosen = []
        for _ in range(n):
            picks = [self.rng.randrange(n) for _ in range(self.config.tournament_size)]
            winner = self.population[picks[0]]
            for index in picks[1:]:
                if winner.fitness < self.population[index].fitness:
                    winner = self.population[index]
            chosen.append(winner.copy())
        self.population = chosen

    def _swap_heads(self, one: Individual, two: Individual) -> None:
        nvars = self.problem.nvars
        if nvars <= 1:
            return
        point = 1 if nvars == 2 else self.rng.randrange(nvars - 1) + 1
        one.x[:point], two.x[:point] = two.x[:point], one.x[:point]

    def crossover(self) -> None:
        """Pair up members chosen with the crossover rate and swap their leading genes."""
        first: Individual | None = None
        for individual in self.population:
            if self.rng.random() < self.config.crossover_rate:
                if first is None:
                    first = individual
                else:
                    self._swap_heads(first, individual)
                    first = None

    def mutate(self) -> None:
        """Redraw each gene uniformly within its bounds with the mutation rate."""
        for individual in self.population:
            for var in range(self.problem.nvars):
                if self.rng.random() < self.config.mutation_rate:
                    individual.x[var] = self._random_value(var)

    def _elitist(self) -> None:
        fitnesses = [ind.fitness for ind in self.population]
        best_fit = min(fitnesses)
        worst_fit = max(fitnesses)
        best_i = max(i for i, f in enumerate(fitnesses) if f == best_fit)
        worst_i = max(i for i, f in enumerate(fitnesses) if f == worst_fit)
        assert self.best is not None
        if best_fit < self.best.fitness:
            self._record_best(self.population[best_i])
            self._check_error(self.generation + 1)
        else:
            self.population[worst_i] = self.best.copy()

    def run_trial(self, trial: int = 0) -> TrialResult:
        """Run one independent trial until the evaluation budget is spent."""
        self.count_eval = 0
        self.generation = 1
        self.best = None
        self.best_value = math.inf
        self.best_gen = self.best_eval = 0
        self.err_eval = self.err_gen = 0
        self.within_error = False
        self.step_values = []
        self._err_time = 0.0
        self._start = self._finish = time.perf_counter()

        self._initialize()
        self._evaluate_population()
        self._keep_the_best()
        while self.count_eval < self.problem.max_evals:
            self.roulette_select()
            self.crossover()
            self.mutate()
            self._evaluate_population()
            self._elitist()
            self.generation += 1

        total_time = time.perf_counter() - self._start
        value = self.best_value
        if 0 < value < 9e-323:
            value = 0.0
        return TrialResult(
            trial=trial,
            best_value=value,
            best_eval=self.best_eval,
            best_gen=self.best_gen,
            err_eval=self.err_eval,
            err_gen=self.err_gen,
            success=self.within_error,
            total_time=total_time,
            result_time=self._finish - self._start,
            err_time=self._err_time,
            step_values=tuple(self.step_values),
        )


def summarize(results: Sequence[TrialResult], config: GAConfig) -> ExperimentSummary:
    """Combine the trials of one experiment into summary statistics."""
    if not results:
        raise ValueError("no trial results to summarize")
    if len(results) != config.trials:
        raise ValueError(f"expected {config.trials} trial results, got {len(results)}")
    n = config.trials
    best = 9e300
    fastest = 100000000
    step_best: tuple[float, ...] = ()
    for result in results:
        if best > result.best_value or (best == result.best_value and fastest > result.best_eval):
            best = result.best_value
            step_best = result.step_values
            fastest = min(fastest, result.best_eval)
    worst = max(-9e300, *(r.best_value for r in results))
    mean = sum(r.best_value for r in results) / n
    if n > 1:
        stdev = math.sqrt(sum((r.best_value - mean) ** 2 for r in results) / (n - 1))
    else:
        stdev = math.nan
    successes = sum(1 for r in results if r.success)
    steps = min(len(r.step_values) for r in results)
    step_avg = tuple(sum(r.step_values[i] for r in results) / n for i in range(steps))
    return ExperimentSummary(
        best=best,
        worst=worst,
        mean=mean,
        stdev=stdev,
        mean_eval=int(sum(r.best_eval for r in results) / n),
        mean_gen=int(sum(r.best_gen for r in results) / n),
        mean_err_eval=int(sum(r.err_eval for r in results) / successes) if successes else 0,
        mean_err_gen=int(sum(r.err_gen for r in results) / successes) if successes else 0,
        success_percent=int(successes / n * 100),
        avg_total_time=sum(r.total_time for r in results) / n,
        avg_result_time=sum(r.result_time for r in results) / n,
        avg_err_time=sum(r.err_time for r in results) / successes if successes else 0.0,
        step_avg=step_avg,
        step_best=step_best,
    )


def _trial_line(result: TrialResult) -> str:
    return (f"{result.trial + 1}\t{result.best_value:.10g}\t{result.best_eval}\t"
            f"{result.best_gen}\t{result.err_eval}\t{result.err_gen}\n")


def run_experiment(number: int, bounds_dir: str | Path = "function",
                   output_dir: str | Path = f"SGA{NVARS}",
                   config: GAConfig | None = None,
                   rng: random.Random | None = None) -> ExperimentSummary:
    """Run every trial of benchmark ``number`` and write its result files.

    Bounds are read from ``bounds_dir/f<number>.txt``. A summary line is
    appended to ``output_dir/result.txt`` and per-function files go to
    ``output_dir/F<number>/``.
    """
    config = config or GAConfig()
    problem = problem_settings(number)
    bounds = read_bounds(Path(bounds_dir) / f"f{number}.txt", problem.nvars)
    problem = replace(problem, bounds=bounds)
    ga = GeneticAlgorithm(problem, config, rng)

    out = Path(output_dir)
    func_dir = out / f"F{number}"
    func_dir.mkdir(parents=True, exist_ok=True)
    low, up = bounds[0]
    settings = (f"F{number}\t[{low:g},{up:g}]\t{problem.nvars}\t{config.pop_size}\t"
                f"{config.crossover_rate:g}\t{config.mutation_rate:g}\t{config.trials}\t"
                f"{problem.max_evals}\t{ga.error:g}")
    print(f"\n\nFunction F{number}\t[{low:g},{up:g}]")

    results = []
    with open(func_dir / "total.txt", "w") as total:
        total.write("Fno\t[low,up]\tnvars\tpop\tpx\tpm\tTRIALNo\tmaxEval\tError\n")
        total.write(settings + "\n\n")
        total.write("trial\tbest_Val\tbest_Eval\tbest_Gen\terr_Eval\terr_Gen\n")
        for trial in range(config.trials):
            result = ga.run_trial(trial)
            results.append(result)
            line = _trial_line(result)
            print(line, end="")
            total.write(line)

    summary = summarize(results, config)
    with open(out / "result.txt", "a") as report:
        report.write(
            f"{settings}\t{summary.best:.10g}\t{summary.worst:.10g}\t"
            f"{summary.mean:.10g}\t{summary.stdev:g}\t{summary.mean_eval}\t"
            f"{summary.mean_gen}\t{summary.mean_err_eval}\t{summary.mean_err_gen}\t"
            f"{summary.success_percent}\t{summary.avg_total_time:g}\t"
            f"{summary.avg_result_time:g}\t{summary.avg_err_time:g}\n")

    step = problem.eval_step
    with open(func_dir / "stepAvg.txt", "w") as avg, open(func_dir / "stepB.txt", "w") as best:
        avg.write("evaluateNo\tValue\n")
        best.write("evaluateNo\tValue\n")
        for i, value in enumerate(summary.step_avg):
            avg.write(f"{step * i + step}\t{value:.10g}\n")
        for i, value in enumerate(summary.step_best):
            best.write(f"{step * i + step}\t{value:.10g}\n")
    return summary


def main(argv: Sequence[str] | None = None) -> int:
    """Run the genetic algorithm on the numbered benchmark functions."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("numbers", nargs="*", type=int, default=[1],
                        help="benchmark function numbers (default: 1)")
    parser.add_argument("--bounds-dir", default="function",
                        help="directory holding f<N>.txt bound files")
    parser.add_argument("--output-dir", default=f"SGA{NVARS}",
                        help="directory for result files")
    parser.add_argument("--trials", type=int, default=GAConfig.trials)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    out = Path(args.output_dir)
    out.mkdir(parents=True, exist_ok=True)
    with open(out / "result.txt", "a") as report:
        report.write(_RESULT_HEADER)

    rng = random.Random(args.seed)
    config = GAConfig(trials=args.trials)
    for number in args.numbers:
        if number not in _SETTINGS:
            print(f"Cannot find f{number}......")
            return 0
        try:
            run_experiment(number, args.bounds_dir, out, config, rng)
        except (OSError, ValueError):
            print("Cannot open input file!")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())