"""
Textbook example - p = 61, q = 53, e = 17
"""
from rsakit import KeyParameterDeriver, NoModularInverse, Signer


def main():
    params = KeyParameterDeriver().from_primes(61, 53, public_exponent=17)
    print(f"n = {params.n}, phi(n) = {params.phi_n}, d = {params.d}")

    # 65^17 mod 3233
    print(f"open(65) = {Signer.verify(65, params.e, params.n)}")
    # 2790^2753 mod 3233
    print(f"sign(2790) = {Signer.sign(2790, params.d, params.n)}")

    # e = 3 divides phi(n) = 60
    try:
        KeyParameterDeriver().from_primes(7, 11, public_exponent=3)
    except NoModularInverse as e:
        print(f"Rejected: {e}")


if __name__ == "__main__":
    main()
