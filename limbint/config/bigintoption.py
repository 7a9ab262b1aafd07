from limbint.config.config import (Config, OptionDescription, BoolOption,
    IntOption, to_optparse)


bigint_optiondescription = OptionDescription("bigint", "Bigint Engine Options", [
    OptionDescription("mul", "Multiplication Options", [
        BoolOption("karatsuba",
                   "multiply large magnitudes with Karatsuba's algorithm",
                   default=False),

        IntOption("karatsuba_cutoff",
                  "number of limbs below which the schoolbook "
                  "multiplication is used",
                  default=38, lower=2),
    ]),

    OptionDescription("division", "Division Options", [
        BoolOption("trace",
                   "log the estimate and the corrections of every "
                   "quotient digit",
                   default=False),
    ]),

    OptionDescription("debug", "Debugging Options", [
        BoolOption("check_canonical",
                   "check limb ranges and the canonical form after "
                   "every normalization",
                   default=False),
    ]),
])


def get_bigint_config(**overrides):
    return Config(bigint_optiondescription, **overrides)


if __name__ == '__main__':
    config = get_bigint_config()
    print(config.getpaths())
    parser = to_optparse(config)
    option, args = parser.parse_args()
    print(config)
