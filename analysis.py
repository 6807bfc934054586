"""Эксперименты: коллизии linear probing vs double hashing."""

import string
import numpy as np
import matplotlib.pyplot as plt
from typing import List
from scipy import stats
from hash_table import HashTable, Strategy, STRATEGY_NAMES
from primes import gen_prime
from snapshots import take_snapshots

LETTERS = np.array(list(string.ascii_lowercase))


def generate_words(size: int, seed: int = None) -> List[str]:
    # случайные слова длины 3..10, без повторов
    rng = np.random.default_rng(seed)
    result = set()
    while len(result) < size:
        length = rng.integers(3, 11)
        result.add("".join(rng.choice(LETTERS, size=length)))
    result = sorted(result)
    rng.shuffle(result)
    return result


def collision_profile(strategy: Strategy, capacity: int, load: float,
                      seed: int = None) -> np.ndarray:
    """Журнал коллизий после заполнения таблицы до load."""
    table = HashTable.new(strategy, capacity)
    for word in generate_words(int(capacity * load), seed):
        table.insert(word)
    return table.placement_costs.copy()


def theory_average_collisions(strategy: Strategy, alpha: float) -> float:
    """Среднее число коллизий при заполнении до alpha (Кнут, успешный поиск - 1)."""
    if alpha <= 0:
        return 0.0
    if strategy is Strategy.LINEAR_P:
        return 0.5 * (1 + 1 / (1 - alpha)) - 1
    return np.log(1 / (1 - alpha)) / alpha - 1


def measure_collisions(capacities: List[int], loads: List[float],
                       strategy: Strategy, trials: int = 5) -> np.ndarray:
    """Средние коллизии для сетки (capacity, load)."""
    results = np.zeros((len(capacities), len(loads)))
    for i, capacity in enumerate(capacities):
        for j, load in enumerate(loads):
            runs = [np.mean(collision_profile(strategy, capacity, load))
                    for _ in range(trials)]
            results[i, j] = np.mean(runs)
    return results


def compare_strategies(capacity: int = 1009, load: float = 0.8, trials: int = 30):
    """Значимо ли double hashing уменьшает коллизии (Mann-Whitney + ANOVA)."""
    groups = {s: [] for s in Strategy}
    for t in range(trials):
        for s in Strategy:
            groups[s].append(np.mean(collision_profile(s, capacity, load, seed=t)))

    linear, double = groups[Strategy.LINEAR_P], groups[Strategy.DOUBLE_H]
    u, p_u = stats.mannwhitneyu(linear, double, alternative="greater")
    f, p_f = stats.f_oneway(linear, double)

    print(f"capacity={capacity}, load={load:.0%}, trials={trials}")
    for s in Strategy:
        print(f"  {STRATEGY_NAMES[s]:15s} mean={np.mean(groups[s]):.3f} std={np.std(groups[s]):.3f}")
    print(f"Mann-Whitney U={u:.1f}, p={p_u:.6f} {'***' if p_u < 0.001 else ''}")
    print(f"ANOVA F={f:.4f}, p={p_f:.6f} {'***' if p_f < 0.001 else ''}")
    return p_u, p_f


def plot_snapshots(capacity: int = 1009, num_stats: int = 20, seed: int = 0):
    """Средние/максимальные коллизии и % at home по мере заполнения."""
    fig, axes = plt.subplots(1, 3, figsize=(16, 5))
    fig.suptitle(f"Заполнение таблицы (capacity={capacity})", fontsize=14)
    words = generate_words(capacity, seed)

    for s, color in zip(Strategy, ["steelblue", "tomato"]):
        table = HashTable.new(s, capacity)
        for word in words:
            table.insert(word)
        snaps = take_snapshots(table, num_stats)
        pct = [sn.percent_full for sn in snaps]
        name = STRATEGY_NAMES[s]

        axes[0].plot(pct, [sn.average_collisions for sn in snaps], 'o-', color=color, label=name)
        axes[0].plot(pct, [theory_average_collisions(s, p / 100) if p < 100 else np.nan for p in pct],
                     '--', color=color, alpha=0.5, label=f"{name} (теория)")
        axes[1].plot(pct, [sn.max_collisions for sn in snaps], 's-', color=color, label=name)
        axes[2].plot(pct, [sn.at_home for sn in snaps], '^-', color=color, label=name)

    for ax, title in zip(axes, ["Средние коллизии", "Максимум коллизий", "% At Home"]):
        ax.set_xlabel("Заполнение (%)")
        ax.set_title(title)
        ax.legend()
        ax.grid(True, alpha=0.3)
    axes[0].set_yscale('log')

    plt.tight_layout()
    plt.savefig("collision_snapshots.png", dpi=300)
    print("Сохранено: collision_snapshots.png")


def plot_heatmap(results: np.ndarray, capacities: List[int], loads: List[float],
                 strategy: Strategy):
    plt.figure(figsize=(10, 8))
    plt.imshow(results, cmap='viridis', aspect='auto')
    plt.colorbar(label='Average collisions')
    plt.xlabel('load factor')
    plt.ylabel('capacity')
    plt.xticks(range(len(loads)), [f"{x:.0%}" for x in loads])
    plt.yticks(range(len(capacities)), capacities)
    plt.title(f'{STRATEGY_NAMES[strategy]}: average collisions')
    plt.tight_layout()
    plt.savefig(f'collisions_{strategy.name.lower()}.png', dpi=300)


if __name__ == "__main__":
    caps = [gen_prime(n) for n in (100, 500, 1000, 5000)]
    loads = [0.25, 0.5, 0.75, 0.9, 0.95]

    print("Running collision grid...")
    for s in Strategy:
        plot_heatmap(measure_collisions(caps, loads, s), caps, loads, s)

    print("\nComparing strategies...")
    compare_strategies()
    plot_snapshots()
