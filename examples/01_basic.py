"""
Basic usage - Generate key parameters, sign a digest, verify it
"""
from rsakit import derive_key_parameters, generate_digest, sign, verify


def main():
    # Two 512-bit primes, e = 65537
    params = derive_key_parameters(512)
    print(f"Modulus: {params.bit_length} bits, e = {params.e}")

    digest = generate_digest("Hello, RSA!")
    signature = sign(digest, params.d, params.n)
    print(f"Signature: {signature:x}")

    recovered = verify(signature, params.e, params.n)
    print(f"Recovered digest matches: {recovered == digest}")


if __name__ == "__main__":
    main()
