from enum import Enum

# Movie controller actions ('actn' atoms)
movie_controller_actions = {
    1:  "mcActionIdle",
    2:  "mcActionDraw",
    3:  "mcActionActivate",
    4:  "mcActionDeactivate",
    5:  "mcActionMouseDown",
    6:  "mcActionKey",
    8:  "mcActionPlay",
    12: "mcActionGoToTime",
    14: "mcActionSetVolume",
    15: "mcActionGetVolume",
    18: "mcActionStep",
    21: "mcActionSetLooping",
    22: "mcActionGetLooping",
    23: "mcActionSetLoopIsPalindrome",
    24: "mcActionGetLoopIsPalindrome",
    25: "mcActionSetGrowBoxBounds",
    26: "mcActionControllerSizeChanged",
    29: "mcActionSetSelectionBegin",
    30: "mcActionSetSelectionDuration",
    32: "mcActionSetKeysEnabled",
    33: "mcActionGetKeysEnabled",
    34: "mcActionSetPlaySelection",
    35: "mcActionGetPlaySelection",
    36: "mcActionSetUseBadge",
    37: "mcActionGetUseBadge",
    38: "mcActionSetFlags",
    39: "mcActionGetFlags",
    40: "mcActionSetPlayEveryFrame",
    41: "mcActionGetPlayEveryFrame",
    42: "mcActionGetPlayRate",
    43: "mcActionShowBalloon",
    44: "mcActionBadgeClick",
    45: "mcActionMovieClick",
    46: "mcActionSuspend",
    47: "mcActionResume",
    48: "mcActionSetControllerKeysEnabled",
    49: "mcActionGetTimeSliderRect",
    50: "mcActionMovieEdited",
    51: "mcActionGetDragEnabled",
    52: "mcActionSetDragEnabled",
    53: "mcActionGetSelectionBegin",
    54: "mcActionGetSelectionDuration",
    55: "mcActionPrerollAndPlay",
    56: "mcActionGetCursorSettingEnabled",
    57: "mcActionSetCursorSettingEnabled",
    58: "mcActionSetColorTable",
    59: "mcActionLinkToURL",
    60: "mcActionCustomButtonClick",
    61: "mcActionForceTimeTableUpdate",
    62: "mcActionSetControllerTimeLimits",
    63: "mcActionExecuteAllActionsForQTEvent",
    64: "mcActionExecuteOneActionForQTEvent",
    65: "mcActionAdjustCursor",
    66: "mcActionUseTrackForTimeTable",
    67: "mcActionClickAndHoldPoint",
    68: "mcActionShowMessageString",
    69: "mcActionShowStatusString",
    70: "mcActionGetExternalMovie",
    71: "mcActionGetChapterTime",
    72: "mcActionPerformActionList",
    73: "mcActionEvaluateExpression",
    74: "mcActionFetchParameterAs",
    75: "mcActionGetCursorByID",
    76: "mcActionGetNextURL",
    77: "mcActionMovieChanged",
    78: "mcActionDoScript",
    79: "mcActionRestartAtTime",
    80: "mcActionGetIndChapter",
    81: "mcActionLinkToURLExtended",
}

# Wired sprite actions ('whic' atoms)
wired_actions = {
    1024:  "kActionMovieSetVolume",
    1025:  "kActionMovieSetRate",
    1026:  "kActionMovieSetLoopingFlags",
    1027:  "kActionMovieGoToTime",
    1028:  "kActionMovieGoToTimeByName",
    1029:  "kActionMovieGoToBeginning",
    1030:  "kActionMovieGoToEnd",
    1031:  "kActionMovieStepForward",
    1032:  "kActionMovieStepBackward",
    1033:  "kActionMovieSetSelection",
    1034:  "kActionMovieSetSelectionByName",
    1035:  "kActionMoviePlaySelection",
    1036:  "kActionMovieSetLanguage",
    1037:  "kActionMovieChanged",
    1038:  "kActionMovieRestartAtTime",
    2048:  "kActionTrackSetVolume",
    2049:  "kActionTrackSetBalance",
    2050:  "kActionTrackSetEnabled",
    2051:  "kActionTrackSetMatrix",
    2052:  "kActionTrackSetLayer",
    2053:  "kActionTrackSetClip",
    2054:  "kActionTrackSetCursor",
    2055:  "kActionTrackSetGraphicsMode",
    3072:  "kActionSpriteSetMatrix",
    3073:  "kActionSpriteSetImageIndex",
    3074:  "kActionSpriteSetVisible",
    3075:  "kActionSpriteSetLayer",
    3076:  "kActionSpriteSetGraphicsMode",
    3078:  "kActionSpritePassMouseToCodec",
    3079:  "kActionSpriteClickOnCodec",
    3080:  "kActionSpriteTranslate",
    3081:  "kActionSpriteScale",
    3082:  "kActionSpriteRotate",
    3083:  "kActionSpriteStretch",
    4096:  "kActionQTVRSetPanAngle",
    4097:  "kActionQTVRSetTiltAngle",
    4098:  "kActionQTVRSetFieldOfView",
    4099:  "kActionQTVRShowDefaultView",
    4100:  "kActionQTVRGoToNodeID",
    5120:  "kActionMusicPlayNote",
    5121:  "kActionMusicSetController",
    6144:  "kActionCase",
    6145:  "kActionWhile",
    6146:  "kActionGoToURL",
    6147:  "kActionSendQTEventToSprite",
    6148:  "kActionDebugStr",
    6149:  "kActionPushCurrentTime",
    6150:  "kActionPushCurrentTimeWithLabel",
    6151:  "kActionPopAndGotoTopTime",
    6152:  "kActionPopAndGotoLabeledTime",
    6153:  "kActionStatusString",
    6154:  "kActionSendQTEventToTrackObject",
    6155:  "kActionAddChannelSubscription",
    6156:  "kActionRemoveChannelSubscription",
    6157:  "kActionOpenCustomActionHandler",
    6158:  "kActionDoScript",
    7168:  "kActionSpriteTrackSetVariable",
    7169:  "kActionSpriteTrackNewSprite",
    7170:  "kActionSpriteTrackDisposeSprite",
    7171:  "kActionSpriteTrackSetVariableToString",
    7172:  "kActionSpriteTrackConcatVariables",
    7173:  "kActionSpriteTrackSetVariableToMovieURL",
    7174:  "kActionSpriteTrackSetVariableToMovieBaseURL",
    8192:  "kActionApplicationNumberAndString",
    9216:  "kActionQD3DNamedObjectTranslateTo",
    9217:  "kActionQD3DNamedObjectScaleTo",
    9218:  "kActionQD3DNamedObjectRotateTo",
    10240: "kActionFlashTrackSetPan",
    10241: "kActionFlashTrackSetZoom",
    10242: "kActionFlashTrackSetZoomRect",
    10243: "kActionFlashTrackGotoFrameNumber",
    10244: "kActionFlashTrackGotoFrameLabel",
    11264: "kActionMovieTrackAddChildMovie",
    11265: "kActionMovieTrackLoadChildMovie",
}

# Generic media graphics modes ('gmin')
graphics_modes = {
    0x0000: "Copy",
    0x0040: "Dither copy",
    0x0020: "Blend",
    0x0024: "Transparent",
    0x0100: "Straight alpha",
    0x0101: "Premul white alpha",
    0x0102: "Premul black alpha",
    0x0104: "Straight alpha blend",
    0x0103: "Composition (dither copy)",
}

# QuickDraw transfer modes ('vmhd')
transfer_modes = {
    0:  "srcCopy",
    1:  "srcOr",
    2:  "srcXor",
    3:  "srcBic",
    4:  "notSrcCopy",
    5:  "notSrcOr",
    6:  "notSrcXor",
    7:  "notSrcBic",
    8:  "patCopy",
    9:  "patOr",
    10: "patXor",
    11: "patBic",
    12: "notPatCopy",
    13: "notPatOr",
    14: "notPatXor",
    15: "notPatBic",
    32: "blend",
    33: "addPin",
    34: "addOver",
    35: "subPin",
    36: "transparent",
    37: "adMax",
    38: "subOver",
    39: "adMin",
    49: "grayishTextOr",
    50: "hilitetransfermode",
    64: "ditherCopy",
}

# Full screen play mode flag bits (sprite graphics mode property)
play_mode_flags = [
    (1, "fullScreenHideCursor"),
    (2, "fullScreenAllowEvents"),
    (4, "fullScreenDontChangeMenuBar"),
    (8, "fullScreenPreflightSize"),
]


class ParamShape(Enum):
    """Binary layout of a 'parm' atom payload, chosen by its action type."""
    ATOMS = "atoms"
    TIME = "time"
    FLAGS = "flags"
    FIXED = "fixed"
    FIXED_FIXED_BOOL = "fixed_fixed_bool"
    LONG = "long"
    NAME = "name"
    QUAD_FLOAT = "quad_float"
    RGN_HANDLE = "rgn_handle"
    SHORT = "short"


param_shapes = {
    "kActionCase":                    ParamShape.ATOMS,
    "kActionWhile":                   ParamShape.ATOMS,
    "kActionMovieGoToTime":           ParamShape.TIME,
    "kActionMovieSetLoopingFlags":    ParamShape.FLAGS,
    "kActionMovieSetRate":            ParamShape.FIXED,
    "kActionSpriteRotate":            ParamShape.FIXED,
    "kActionSpriteTranslate":         ParamShape.FIXED_FIXED_BOOL,
    "kActionMovieSetLanguage":        ParamShape.LONG,
    "kActionMovieSetSelection":       ParamShape.LONG,
    "kActionMovieRestartAtTime":      ParamShape.LONG,
    "kActionQTVRGoToNodeID":          ParamShape.LONG,
    "kActionMusicPlayNote":           ParamShape.LONG,
    "kActionMusicSetController":      ParamShape.LONG,
    "kOperandSpriteTrackVariable":    ParamShape.LONG,
    "kActionMovieGoToTimeByName":     ParamShape.NAME,
    "kActionMovieSetSelectionByName": ParamShape.NAME,
    "kActionSpriteTrackSetVariable":  ParamShape.QUAD_FLOAT,
    "kActionTrackSetClip":            ParamShape.RGN_HANDLE,
    "kActionMovieSetVolume":          ParamShape.SHORT,
    "kActionTrackSetVolume":          ParamShape.SHORT,
    "kActionTrackSetBalance":         ParamShape.SHORT,
    "kActionTrackSetLayer":           ParamShape.SHORT,
    "kActionSpriteSetImageIndex":     ParamShape.SHORT,
    "kActionSpriteSetVisible":        ParamShape.SHORT,
    "kActionSpriteSetLayer":          ParamShape.SHORT,
}
