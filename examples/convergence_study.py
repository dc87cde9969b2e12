from midpointQuadrature.example_problems import LogSineProblem
from midpointQuadrature.convergence import convergence_study

import numpy as np
import argparse

parser = argparse.ArgumentParser(description="Check how the midpoint estimate of the log-sine integral settles as delta_x is halved")
parser.add_argument('--low', type=float, default=0.5, help='Lower bound of integration (default: 0.5)')
parser.add_argument('--high', type=float, default=2.5, help='Upper bound of integration (default: 2.5)')
parser.add_argument('--Ns', type=int, nargs='+', default=[1_000, 10_000, 100_000], help='Numbers of subintervals to compare against 2N (default: [1000, 10000, 100000])')

if __name__ == '__main__':
    args = parser.parse_args()

    problem = LogSineProblem(args.low, args.high)
    differences = convergence_study(problem, args.Ns, verbose=True)

    print(f'True answer of {str(problem)}: {problem.answer}')
    for N, difference in zip(args.Ns, differences):
        print(f'N = {N}: |I(2N) - I(N)| = {difference:.3e}')
    if np.all(np.diff(differences) < 0):
        print('differences decrease monotonically')
