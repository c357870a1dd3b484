from conv_config import ConvolutionConfiguration
from profiling import profile, format_duration

# A(x) = 1 + 2x + 3x^2 + 4x^3 and B(x) = 5 + 6x + 7x^2 + 8x^3
SAMPLE_A = [1, 2, 3, 4]
SAMPLE_B = [5, 6, 7, 8]

def run_op(op):
    """Time op on the sample polynomials and print the duration and coefficients."""
    result, duration = profile(op)
    print(f"Time taken: {format_duration(duration)}")
    print(f"Resulting coefficients: {result.tolist()}")
    return result


def main():
    config = ConvolutionConfiguration(len(SAMPLE_A))
    run_op(lambda: config.polynomial_mult(SAMPLE_A, SAMPLE_B))
    run_op(lambda: config.ring_mult(SAMPLE_A, SAMPLE_B))


if __name__ == "__main__":
    main()
