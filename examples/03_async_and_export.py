"""
Async derivation, search instrumentation and PEM export
"""
import asyncio
from rsakit import KeyParameterDeriver, PrimeGenerator, Signer, setup_logging, LogLevel


async def main():
    setup_logging(LogLevel.DEBUG)

    generator = PrimeGenerator()
    result = generator.search(256)
    print(f"256-bit prime after {result.iterations} candidates")

    deriver = KeyParameterDeriver(generator)
    params = await deriver.derive_async(512)

    signer = Signer()
    signature = signer.sign_message("exported", params)
    print(f"Valid: {signer.verify_message('exported', signature, params.public_key)}")

    print(params.to_pem().decode())
    print(params.public_key.to_pem().decode())


if __name__ == "__main__":
    asyncio.run(main())
