"""Local lookup table of selectors that commonly show up in batched calls.

Names here are display hints only; the decoder never relies on them. The
resolver falls through to the Sourcify 4byte API for anything missing,
when remote lookups are enabled.
"""

# selector (8 hex digits, no prefix) -> function signature
KNOWN_SELECTORS: dict[str, str] = {
    # Batching
    "ac9650d8": "multicall(bytes[])",
    "5ae401dc": "multicall(uint256,bytes[])",
    "1f0464d1": "multicall(bytes32,bytes[])",
    "252dba42": "aggregate((address,bytes)[])",
    "82ad56cb": "aggregate3((address,bool,bytes)[])",
    "8d80ff0a": "multiSend(bytes)",
    # Uniswap v3 router / position manager
    "414bf389": "exactInputSingle((address,address,uint24,address,uint256,uint256,uint256,uint160))",
    "04e45aaf": "exactInputSingle((address,address,uint24,address,uint256,uint256,uint160))",
    "c04b8d59": "exactInput((bytes,address,uint256,uint256,uint256))",
    "db3e2198": "exactOutputSingle((address,address,uint24,address,uint256,uint256,uint256,uint160))",
    "88316456": "mint((address,address,uint24,int24,int24,uint256,uint256,uint256,uint256,address,uint256))",
    "13ead562": "createAndInitializePoolIfNecessary(address,address,uint24,uint160)",
    "12210e8a": "refundETH()",
    "49404b7c": "unwrapWETH9(uint256,address)",
    "df2ab5bb": "sweepToken(address,uint256,address)",
    "f3995c67": "selfPermit(address,uint256,uint256,uint8,bytes32,bytes32)",
    "4659a494": "selfPermitAllowed(address,uint256,uint256,uint8,bytes32,bytes32)",
    # ERC20
    "a9059cbb": "transfer(address,uint256)",
    "095ea7b3": "approve(address,uint256)",
    "23b872dd": "transferFrom(address,address,uint256)",
    "d505accf": "permit(address,address,uint256,uint256,uint256,uint8,bytes32,bytes32)",
    # Proxy / ownership
    "3659cfe6": "upgradeTo(address)",
    "4f1ef286": "upgradeToAndCall(address,bytes)",
    "f2fde38b": "transferOwnership(address)",
}
