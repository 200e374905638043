"""Titlecase exceptions from the Unicode Character Database, version 14.0.0.

AUTO GENERATED! DO NOT EDIT MANUALLY! See ucd_titlecase/assemble.py
"""

UNICODE_VERSION = "14.0.0"

TITLECASE_TABLE = (
    ("\u0061", ("\u0041", "\0", "\0")),
    ("\u0062", ("\u0042", "\0", "\0")),
    ("\u0063", ("\u0043", "\0", "\0")),
    ("\u0064", ("\u0044", "\0", "\0")),
    ("\u0065", ("\u0045", "\0", "\0")),
    ("\u0066", ("\u0046", "\0", "\0")),
    ("\u0067", ("\u0047", "\0", "\0")),
    ("\u0068", ("\u0048", "\0", "\0")),
    ("\u0069", ("\u0049", "\0", "\0")),
    ("\u006A", ("\u004A", "\0", "\0")),
    ("\u006B", ("\u004B", "\0", "\0")),
    ("\u006C", ("\u004C", "\0", "\0")),
    ("\u006D", ("\u004D", "\0", "\0")),
    ("\u006E", ("\u004E", "\0", "\0")),
    ("\u006F", ("\u004F", "\0", "\0")),
    ("\u0070", ("\u0050", "\0", "\0")),
    ("\u0071", ("\u0051", "\0", "\0")),
    ("\u0072", ("\u0052", "\0", "\0")),
    ("\u0073", ("\u0053", "\0", "\0")),
    ("\u0074", ("\u0054", "\0", "\0")),
    ("\u0075", ("\u0055", "\0", "\0")),
    ("\u0076", ("\u0056", "\0", "\0")),
    ("\u0077", ("\u0057", "\0", "\0")),
    ("\u0078", ("\u0058", "\0", "\0")),
    ("\u0079", ("\u0059", "\0", "\0")),
    ("\u007A", ("\u005A", "\0", "\0")),
    ("\u00B5", ("\u039C", "\0", "\0")),
    ("\u00DF", ("\u0053", "\u0073", "\0")),
    ("\u00E0", ("\u00C0", "\0", "\0")),
    ("\u00E1", ("\u00C1", "\0", "\0")),
    ("\u00E2", ("\u00C2", "\0", "\0")),
    ("\u00E3", ("\u00C3", "\0", "\0")),
    ("\u00E4", ("\u00C4", "\0", "\0")),
    ("\u00E5", ("\u00C5", "\0", "\0")),
    ("\u00E6", ("\u00C6", "\0", "\0")),
    ("\u00E7", ("\u00C7", "\0", "\0")),
    ("\u00E8", ("\u00C8", "\0", "\0")),
    ("\u00E9", ("\u00C9", "\0", "\0")),
    ("\u00EA", ("\u00CA", "\0", "\0")),
    ("\u00EB", ("\u00CB", "\0", "\0")),
    ("\u00EC", ("\u00CC", "\0", "\0")),
    ("\u00ED", ("\u00CD", "\0", "\0")),
    ("\u00EE", ("\u00CE", "\0", "\0")),
    ("\u00EF", ("\u00CF", "\0", "\0")),
    ("\u00F0", ("\u00D0", "\0", "\0")),
    ("\u00F1", ("\u00D1", "\0", "\0")),
    ("\u00F2", ("\u00D2", "\0", "\0")),
    ("\u00F3", ("\u00D3", "\0", "\0")),
    ("\u00F4", ("\u00D4", "\0", "\0")),
    ("\u00F5", ("\u00D5", "\0", "\0")),
    ("\u00F6", ("\u00D6", "\0", "\0")),
    ("\u00F8", ("\u00D8", "\0", "\0")),
    ("\u00F9", ("\u00D9", "\0", "\0")),
    ("\u00FA", ("\u00DA", "\0", "\0")),
    ("\u00FB", ("\u00DB", "\0", "\0")),
    ("\u00FC", ("\u00DC", "\0", "\0")),
    ("\u00FD", ("\u00DD", "\0", "\0")),
    ("\u00FE", ("\u00DE", "\0", "\0")),
    ("\u00FF", ("\u0178", "\0", "\0")),
    ("\u0101", ("\u0100", "\0", "\0")),
    ("\u0103", ("\u0102", "\0", "\0")),
    ("\u0105", ("\u0104", "\0", "\0")),
    ("\u0107", ("\u0106", "\0", "\0")),
    ("\u0109", ("\u0108", "\0", "\0")),
    ("\u010B", ("\u010A", "\0", "\0")),
    ("\u010D", ("\u010C", "\0", "\0")),
    ("\u010F", ("\u010E", "\0", "\0")),
    ("\u0111", ("\u0110", "\0", "\0")),
    ("\u0113", ("\u0112", "\0", "\0")),
    ("\u0115", ("\u0114", "\0", "\0")),
    ("\u0117", ("\u0116", "\0", "\0")),
    ("\u0119", ("\u0118", "\0", "\0")),
    ("\u011B", ("\u011A", "\0", "\0")),
    ("\u011D", ("\u011C", "\0", "\0")),
    ("\u011F", ("\u011E", "\0", "\0")),
    ("\u0121", ("\u0120", "\0", "\0")),
    ("\u0123", ("\u0122", "\0", "\0")),
    ("\u0125", ("\u0124", "\0", "\0")),
    ("\u0127", ("\u0126", "\0", "\0")),
    ("\u0129", ("\u0128", "\0", "\0")),
    ("\u012B", ("\u012A", "\0", "\0")),
    ("\u012D", ("\u012C", "\0", "\0")),
    ("\u012F", ("\u012E", "\0", "\0")),
    ("\u0131", ("\u0049", "\0", "\0")),
    ("\u0133", ("\u0132", "\0", "\0")),
    ("\u0135", ("\u0134", "\0", "\0")),
    ("\u0137", ("\u0136", "\0", "\0")),
    ("\u013A", ("\u0139", "\0", "\0")),
    ("\u013C", ("\u013B", "\0", "\0")),
    ("\u013E", ("\u013D", "\0", "\0")),
    ("\u0140", ("\u013F", "\0", "\0")),
    ("\u0142", ("\u0141", "\0", "\0")),
    ("\u0144", ("\u0143", "\0", "\0")),
    ("\u0146", ("\u0145", "\0", "\0")),
    ("\u0148", ("\u0147", "\0", "\0")),
    ("\u0149", ("\u02BC", "\u004E", "\0")),
    ("\u014B", ("\u014A", "\0", "\0")),
    ("\u014D", ("\u014C", "\0", "\0")),
    ("\u014F", ("\u014E", "\0", "\0")),
    ("\u0151", ("\u0150", "\0", "\0")),
    ("\u0153", ("\u0152", "\0", "\0")),
    ("\u0155", ("\u0154", "\0", "\0")),
    ("\u0157", ("\u0156", "\0", "\0")),
    ("\u0159", ("\u0158", "\0", "\0")),
    ("\u015B", ("\u015A", "\0", "\0")),
    ("\u015D", ("\u015C", "\0", "\0")),
    ("\u015F", ("\u015E", "\0", "\0")),
    ("\u0161", ("\u0160", "\0", "\0")),
    ("\u0163", ("\u0162", "\0", "\0")),
    ("\u0165", ("\u0164", "\0", "\0")),
    ("\u0167", ("\u0166", "\0", "\0")),
    ("\u0169", ("\u0168", "\0", "\0")),
    ("\u016B", ("\u016A", "\0", "\0")),
    ("\u016D", ("\u016C", "\0", "\0")),
    ("\u016F", ("\u016E", "\0", "\0")),
    ("\u0171", ("\u0170", "\0", "\0")),
    ("\u0173", ("\u0172", "\0", "\0")),
    ("\u0175", ("\u0174", "\0", "\0")),
    ("\u0177", ("\u0176", "\0", "\0")),
    ("\u017A", ("\u0179", "\0", "\0")),
    ("\u017C", ("\u017B", "\0", "\0")),
    ("\u017E", ("\u017D", "\0", "\0")),
    ("\u017F", ("\u0053", "\0", "\0")),
    ("\u0180", ("\u0243", "\0", "\0")),
    ("\u0183", ("\u0182", "\0", "\0")),
    ("\u0185", ("\u0184", "\0", "\0")),
    ("\u0188", ("\u0187", "\0", "\0")),
    ("\u018C", ("\u018B", "\0", "\0")),
    ("\u0192", ("\u0191", "\0", "\0")),
    ("\u0195", ("\u01F6", "\0", "\0")),
    ("\u0199", ("\u0198", "\0", "\0")),
    ("\u019A", ("\u023D", "\0", "\0")),
    ("\u019E", ("\u0220", "\0", "\0")),
    ("\u01A1", ("\u01A0", "\0", "\0")),
    ("\u01A3", ("\u01A2", "\0", "\0")),
    ("\u01A5", ("\u01A4", "\0", "\0")),
    ("\u01A8", ("\u01A7", "\0", "\0")),
    ("\u01AD", ("\u01AC", "\0", "\0")),
    ("\u01B0", ("\u01AF", "\0", "\0")),
    ("\u01B4", ("\u01B3", "\0", "\0")),
    ("\u01B6", ("\u01B5", "\0", "\0")),
    ("\u01B9", ("\u01B8", "\0", "\0")),
    ("\u01BD", ("\u01BC", "\0", "\0")),
    ("\u01BF", ("\u01F7", "\0", "\0")),
    ("\u01C4", ("\u01C5", "\0", "\0")),
    ("\u01C6", ("\u01C5", "\0", "\0")),
    ("\u01C7", ("\u01C8", "\0", "\0")),
    ("\u01C9", ("\u01C8", "\0", "\0")),
    ("\u01CA", ("\u01CB", "\0", "\0")),
    ("\u01CC", ("\u01CB", "\0", "\0")),
    ("\u01CE", ("\u01CD", "\0", "\0")),
    ("\u01D0", ("\u01CF", "\0", "\0")),
    ("\u01D2", ("\u01D1", "\0", "\0")),
    ("\u01D4", ("\u01D3", "\0", "\0")),
    ("\u01D6", ("\u01D5", "\0", "\0")),
    ("\u01D8", ("\u01D7", "\0", "\0")),
    ("\u01DA", ("\u01D9", "\0", "\0")),
    ("\u01DC", ("\u01DB", "\0", "\0")),
    ("\u01DD", ("\u018E", "\0", "\0")),
    ("\u01DF", ("\u01DE", "\0", "\0")),
    ("\u01E1", ("\u01E0", "\0", "\0")),
    ("\u01E3", ("\u01E2", "\0", "\0")),
    ("\u01E5", ("\u01E4", "\0", "\0")),
    ("\u01E7", ("\u01E6", "\0", "\0")),
    ("\u01E9", ("\u01E8", "\0", "\0")),
    ("\u01EB", ("\u01EA", "\0", "\0")),
    ("\u01ED", ("\u01EC", "\0", "\0")),
    ("\u01EF", ("\u01EE", "\0", "\0")),
    ("\u01F0", ("\u004A", "\u030C", "\0")),
    ("\u01F1", ("\u01F2", "\0", "\0")),
    ("\u01F3", ("\u01F2", "\0", "\0")),
    ("\u01F5", ("\u01F4", "\0", "\0")),
    ("\u01F9", ("\u01F8", "\0", "\0")),
    ("\u01FB", ("\u01FA", "\0", "\0")),
    ("\u01FD", ("\u01FC", "\0", "\0")),
    ("\u01FF", ("\u01FE", "\0", "\0")),
    ("\u0201", ("\u0200", "\0", "\0")),
    ("\u0203", ("\u0202", "\0", "\0")),
    ("\u0205", ("\u0204", "\0", "\0")),
    ("\u0207", ("\u0206", "\0", "\0")),
    ("\u0209", ("\u0208", "\0", "\0")),
    ("\u020B", ("\u020A", "\0", "\0")),
    ("\u020D", ("\u020C", "\0", "\0")),
    ("\u020F", ("\u020E", "\0", "\0")),
    ("\u0211", ("\u0210", "\0", "\0")),
    ("\u0213", ("\u0212", "\0", "\0")),
    ("\u0215", ("\u0214", "\0", "\0")),
    ("\u0217", ("\u0216", "\0", "\0")),
    ("\u0219", ("\u0218", "\0", "\0")),
    ("\u021B", ("\u021A", "\0", "\0")),
    ("\u021D", ("\u021C", "\0", "\0")),
    ("\u021F", ("\u021E", "\0", "\0")),
    ("\u0223", ("\u0222", "\0", "\0")),
    ("\u0225", ("\u0224", "\0", "\0")),
    ("\u0227", ("\u0226", "\0", "\0")),
    ("\u0229", ("\u0228", "\0", "\0")),
    ("\u022B", ("\u022A", "\0", "\0")),
    ("\u022D", ("\u022C", "\0", "\0")),
    ("\u022F", ("\u022E", "\0", "\0")),
    ("\u0231", ("\u0230", "\0", "\0")),
    ("\u0233", ("\u0232", "\0", "\0")),
    ("\u023C", ("\u023B", "\0", "\0")),
    ("\u023F", ("\u2C7E", "\0", "\0")),
    ("\u0240", ("\u2C7F", "\0", "\0")),
    ("\u0242", ("\u0241", "\0", "\0")),
    ("\u0247", ("\u0246", "\0", "\0")),
    ("\u0249", ("\u0248", "\0", "\0")),
    ("\u024B", ("\u024A", "\0", "\0")),
    ("\u024D", ("\u024C", "\0", "\0")),
    ("\u024F", ("\u024E", "\0", "\0")),
    ("\u0250", ("\u2C6F", "\0", "\0")),
    ("\u0251", ("\u2C6D", "\0", "\0")),
    ("\u0252", ("\u2C70", "\0", "\0")),
    ("\u0253", ("\u0181", "\0", "\0")),
    ("\u0254", ("\u0186", "\0", "\0")),
    ("\u0256", ("\u0189", "\0", "\0")),
    ("\u0257", ("\u018A", "\0", "\0")),
    ("\u0259", ("\u018F", "\0", "\0")),
    ("\u025B", ("\u0190", "\0", "\0")),
    ("\u025C", ("\uA7AB", "\0", "\0")),
    ("\u0260", ("\u0193", "\0", "\0")),
    ("\u0261", ("\uA7AC", "\0", "\0")),
    ("\u0263", ("\u0194", "\0", "\0")),
    ("\u0265", ("\uA78D", "\0", "\0")),
    ("\u0266", ("\uA7AA", "\0", "\0")),
    ("\u0268", ("\u0197", "\0", "\0")),
    ("\u0269", ("\u0196", "\0", "\0")),
    ("\u026A", ("\uA7AE", "\0", "\0")),
    ("\u026B", ("\u2C62", "\0", "\0")),
    ("\u026C", ("\uA7AD", "\0", "\0")),
    ("\u026F", ("\u019C", "\0", "\0")),
    ("\u0271", ("\u2C6E", "\0", "\0")),
    ("\u0272", ("\u019D", "\0", "\0")),
    ("\u0275", ("\u019F", "\0", "\0")),
    ("\u027D", ("\u2C64", "\0", "\0")),
    ("\u0280", ("\u01A6", "\0", "\0")),
    ("\u0282", ("\uA7C5", "\0", "\0")),
    ("\u0283", ("\u01A9", "\0", "\0")),
    ("\u0287", ("\uA7B1", "\0", "\0")),
    ("\u0288", ("\u01AE", "\0", "\0")),
    ("\u0289", ("\u0244", "\0", "\0")),
    ("\u028A", ("\u01B1", "\0", "\0")),
    ("\u028B", ("\u01B2", "\0", "\0")),
    ("\u028C", ("\u0245", "\0", "\0")),
    ("\u0292", ("\u01B7", "\0", "\0")),
    ("\u029D", ("\uA7B2", "\0", "\0")),
    ("\u029E", ("\uA7B0", "\0", "\0")),
    ("\u0345", ("\u0399", "\0", "\0")),
    ("\u0371", ("\u0370", "\0", "\0")),
    ("\u0373", ("\u0372", "\0", "\0")),
    ("\u0377", ("\u0376", "\0", "\0")),
    ("\u037B", ("\u03FD", "\0", "\0")),
    ("\u037C", ("\u03FE", "\0", "\0")),
    ("\u037D", ("\u03FF", "\0", "\0")),
    ("\u0390", ("\u0399", "\u0308", "\u0301")),
    ("\u03AC", ("\u0386", "\0", "\0")),
    ("\u03AD", ("\u0388", "\0", "\0")),
    ("\u03AE", ("\u0389", "\0", "\0")),
    ("\u03AF", ("\u038A", "\0", "\0")),
    ("\u03B0", ("\u03A5", "\u0308", "\u0301")),
    ("\u03B1", ("\u0391", "\0", "\0")),
    ("\u03B2", ("\u0392", "\0", "\0")),
    ("\u03B3", ("\u0393", "\0", "\0")),
    ("\u03B4", ("\u0394", "\0", "\0")),
    ("\u03B5", ("\u0395", "\0", "\0")),
    ("\u03B6", ("\u0396", "\0", "\0")),
    ("\u03B7", ("\u0397", "\0", "\0")),
    ("\u03B8", ("\u0398", "\0", "\0")),
    ("\u03B9", ("\u0399", "\0", "\0")),
    ("\u03BA", ("\u039A", "\0", "\0")),
    ("\u03BB", ("\u039B", "\0", "\0")),
    ("\u03BC", ("\u039C", "\0", "\0")),
    ("\u03BD", ("\u039D", "\0", "\0")),
    ("\u03BE", ("\u039E", "\0", "\0")),
    ("\u03BF", ("\u039F", "\0", "\0")),
    ("\u03C0", ("\u03A0", "\0", "\0")),
    ("\u03C1", ("\u03A1", "\0", "\0")),
    ("\u03C2", ("\u03A3", "\0", "\0")),
    ("\u03C3", ("\u03A3", "\0", "\0")),
    ("\u03C4", ("\u03A4", "\0", "\0")),
    ("\u03C5", ("\u03A5", "\0", "\0")),
    ("\u03C6", ("\u03A6", "\0", "\0")),
    ("\u03C7", ("\u03A7", "\0", "\0")),
    ("\u03C8", ("\u03A8", "\0", "\0")),
    ("\u03C9", ("\u03A9", "\0", "\0")),
    ("\u03CA", ("\u03AA", "\0", "\0")),
    ("\u03CB", ("\u03AB", "\0", "\0")),
    ("\u03CC", ("\u038C", "\0", "\0")),
    ("\u03CD", ("\u038E", "\0", "\0")),
    ("\u03CE", ("\u038F", "\0", "\0")),
    ("\u03D0", ("\u0392", "\0", "\0")),
    ("\u03D1", ("\u0398", "\0", "\0")),
    ("\u03D5", ("\u03A6", "\0", "\0")),
    ("\u03D6", ("\u03A0", "\0", "\0")),
    ("\u03D7", ("\u03CF", "\0", "\0")),
    ("\u03D9", ("\u03D8", "\0", "\0")),
    ("\u03DB", ("\u03DA", "\0", "\0")),
    ("\u03DD", ("\u03DC", "\0", "\0")),
    ("\u03DF", ("\u03DE", "\0", "\0")),
    ("\u03E1", ("\u03E0", "\0", "\0")),
    ("\u03E3", ("\u03E2", "\0", "\0")),
    ("\u03E5", ("\u03E4", "\0", "\0")),
    ("\u03E7", ("\u03E6", "\0", "\0")),
    ("\u03E9", ("\u03E8", "\0", "\0")),
    ("\u03EB", ("\u03EA", "\0", "\0")),
    ("\u03ED", ("\u03EC", "\0", "\0")),
    ("\u03EF", ("\u03EE", "\0", "\0")),
    ("\u03F0", ("\u039A", "\0", "\0")),
    ("\u03F1", ("\u03A1", "\0", "\0")),
    ("\u03F2", ("\u03F9", "\0", "\0")),
    ("\u03F3", ("\u037F", "\0", "\0")),
    ("\u03F5", ("\u0395", "\0", "\0")),
    ("\u03F8", ("\u03F7", "\0", "\0")),
    ("\u03FB", ("\u03FA", "\0", "\0")),
    ("\u0430", ("\u0410", "\0", "\0")),
    ("\u0431", ("\u0411", "\0", "\0")),
    ("\u0432", ("\u0412", "\0", "\0")),
    ("\u0433", ("\u0413", "\0", "\0")),
    ("\u0434", ("\u0414", "\0", "\0")),
    ("\u0435", ("\u0415", "\0", "\0")),
    ("\u0436", ("\u0416", "\0", "\0")),
    ("\u0437", ("\u0417", "\0", "\0")),
    ("\u0438", ("\u0418", "\0", "\0")),
    ("\u0439", ("\u0419", "\0", "\0")),
    ("\u043A", ("\u041A", "\0", "\0")),
    ("\u043B", ("\u041B", "\0", "\0")),
    ("\u043C", ("\u041C", "\0", "\0")),
    ("\u043D", ("\u041D", "\0", "\0")),
    ("\u043E", ("\u041E", "\0", "\0")),
    ("\u043F", ("\u041F", "\0", "\0")),
    ("\u0440", ("\u0420", "\0", "\0")),
    ("\u0441", ("\u0421", "\0", "\0")),
    ("\u0442", ("\u0422", "\0", "\0")),
    ("\u0443", ("\u0423", "\0", "\0")),
    ("\u0444", ("\u0424", "\0", "\0")),
    ("\u0445", ("\u0425", "\0", "\0")),
    ("\u0446", ("\u0426", "\0", "\0")),
    ("\u0447", ("\u0427", "\0", "\0")),
    ("\u0448", ("\u0428", "\0", "\0")),
    ("\u0449", ("\u0429", "\0", "\0")),
    ("\u044A", ("\u042A", "\0", "\0")),
    ("\u044B", ("\u042B", "\0", "\0")),
    ("\u044C", ("\u042C", "\0", "\0")),
    ("\u044D", ("\u042D", "\0", "\0")),
    ("\u044E", ("\u042E", "\0", "\0")),
    ("\u044F", ("\u042F", "\0", "\0")),
    ("\u0450", ("\u0400", "\0", "\0")),
    ("\u0451", ("\u0401", "\0", "\0")),
    ("\u0452", ("\u0402", "\0", "\0")),
    ("\u0453", ("\u0403", "\0", "\0")),
    ("\u0454", ("\u0404", "\0", "\0")),
    ("\u0455", ("\u0405", "\0", "\0")),
    ("\u0456", ("\u0406", "\0", "\0")),
    ("\u0457", ("\u0407", "\0", "\0")),
    ("\u0458", ("\u0408", "\0", "\0")),
    ("\u0459", ("\u0409", "\0", "\0")),
    ("\u045A", ("\u040A", "\0", "\0")),
    ("\u045B", ("\u040B", "\0", "\0")),
    ("\u045C", ("\u040C", "\0", "\0")),
    ("\u045D", ("\u040D", "\0", "\0")),
    ("\u045E", ("\u040E", "\0", "\0")),
    ("\u045F", ("\u040F", "\0", "\0")),
    ("\u0461", ("\u0460", "\0", "\0")),
    ("\u0463", ("\u0462", "\0", "\0")),
    ("\u0465", ("\u0464", "\0", "\0")),
    ("\u0467", ("\u0466", "\0", "\0")),
    ("\u0469", ("\u0468", "\0", "\0")),
    ("\u046B", ("\u046A", "\0", "\0")),
    ("\u046D", ("\u046C", "\0", "\0")),
    ("\u046F", ("\u046E", "\0", "\0")),
    ("\u0471", ("\u0470", "\0", "\0")),
    ("\u0473", ("\u0472", "\0", "\0")),
    ("\u0475", ("\u0474", "\0", "\0")),
    ("\u0477", ("\u0476", "\0", "\0")),
    ("\u0479", ("\u0478", "\0", "\0")),
    ("\u047B", ("\u047A", "\0", "\0")),
    ("\u047D", ("\u047C", "\0", "\0")),
    ("\u047F", ("\u047E", "\0", "\0")),
    ("\u0481", ("\u0480", "\0", "\0")),
    ("\u048B", ("\u048A", "\0", "\0")),
    ("\u048D", ("\u048C", "\0", "\0")),
    ("\u048F", ("\u048E", "\0", "\0")),
    ("\u0491", ("\u0490", "\0", "\0")),
    ("\u0493", ("\u0492", "\0", "\0")),
    ("\u0495", ("\u0494", "\0", "\0")),
    ("\u0497", ("\u0496", "\0", "\0")),
    ("\u0499", ("\u0498", "\0", "\0")),
    ("\u049B", ("\u049A", "\0", "\0")),
    ("\u049D", ("\u049C", "\0", "\0")),
    ("\u049F", ("\u049E", "\0", "\0")),
    ("\u04A1", ("\u04A0", "\0", "\0")),
    ("\u04A3", ("\u04A2", "\0", "\0")),
    ("\u04A5", ("\u04A4", "\0", "\0")),
    ("\u04A7", ("\u04A6", "\0", "\0")),
    ("\u04A9", ("\u04A8", "\0", "\0")),
    ("\u04AB", ("\u04AA", "\0", "\0")),
    ("\u04AD", ("\u04AC", "\0", "\0")),
    ("\u04AF", ("\u04AE", "\0", "\0")),
    ("\u04B1", ("\u04B0", "\0", "\0")),
    ("\u04B3", ("\u04B2", "\0", "\0")),
    ("\u04B5", ("\u04B4", "\0", "\0")),
    ("\u04B7", ("\u04B6", "\0", "\0")),
    ("\u04B9", ("\u04B8", "\0", "\0")),
    ("\u04BB", ("\u04BA", "\0", "\0")),
    ("\u04BD", ("\u04BC", "\0", "\0")),
    ("\u04BF", ("\u04BE", "\0", "\0")),
    ("\u04C2", ("\u04C1", "\0", "\0")),
    ("\u04C4", ("\u04C3", "\0", "\0")),
    ("\u04C6", ("\u04C5", "\0", "\0")),
    ("\u04C8", ("\u04C7", "\0", "\0")),
    ("\u04CA", ("\u04C9", "\0", "\0")),
    ("\u04CC", ("\u04CB", "\0", "\0")),
    ("\u04CE", ("\u04CD", "\0", "\0")),
    ("\u04CF", ("\u04C0", "\0", "\0")),
    ("\u04D1", ("\u04D0", "\0", "\0")),
    ("\u04D3", ("\u04D2", "\0", "\0")),
    ("\u04D5", ("\u04D4", "\0", "\0")),
    ("\u04D7", ("\u04D6", "\0", "\0")),
    ("\u04D9", ("\u04D8", "\0", "\0")),
    ("\u04DB", ("\u04DA", "\0", "\0")),
    ("\u04DD", ("\u04DC", "\0", "\0")),
    ("\u04DF", ("\u04DE", "\0", "\0")),
    ("\u04E1", ("\u04E0", "\0", "\0")),
    ("\u04E3", ("\u04E2", "\0", "\0")),
    ("\u04E5", ("\u04E4", "\0", "\0")),
    ("\u04E7", ("\u04E6", "\0", "\0")),
    ("\u04E9", ("\u04E8", "\0", "\0")),
    ("\u04EB", ("\u04EA", "\0", "\0")),
    ("\u04ED", ("\u04EC", "\0", "\0")),
    ("\u04EF", ("\u04EE", "\0", "\0")),
    ("\u04F1", ("\u04F0", "\0", "\0")),
    ("\u04F3", ("\u04F2", "\0", "\0")),
    ("\u04F5", ("\u04F4", "\0", "\0")),
    ("\u04F7", ("\u04F6", "\0", "\0")),
    ("\u04F9", ("\u04F8", "\0", "\0")),
    ("\u04FB", ("\u04FA", "\0", "\0")),
    ("\u04FD", ("\u04FC", "\0", "\0")),
    ("\u04FF", ("\u04FE", "\0", "\0")),
    ("\u0501", ("\u0500", "\0", "\0")),
    ("\u0503", ("\u0502", "\0", "\0")),
    ("\u0505", ("\u0504", "\0", "\0")),
    ("\u0507", ("\u0506", "\0", "\0")),
    ("\u0509", ("\u0508", "\0", "\0")),
    ("\u050B", ("\u050A", "\0", "\0")),
    ("\u050D", ("\u050C", "\0", "\0")),
    ("\u050F", ("\u050E", "\0", "\0")),
    ("\u0511", ("\u0510", "\0", "\0")),
    ("\u0513", ("\u0512", "\0", "\0")),
    ("\u0515", ("\u0514", "\0", "\0")),
    ("\u0517", ("\u0516", "\0", "\0")),
    ("\u0519", ("\u0518", "\0", "\0")),
    ("\u051B", ("\u051A", "\0", "\0")),
    ("\u051D", ("\u051C", "\0", "\0")),
    ("\u051F", ("\u051E", "\0", "\0")),
    ("\u0521", ("\u0520", "\0", "\0")),
    ("\u0523", ("\u0522", "\0", "\0")),
    ("\u0525", ("\u0524", "\0", "\0")),
    ("\u0527", ("\u0526", "\0", "\0")),
    ("\u0529", ("\u0528", "\0", "\0")),
    ("\u052B", ("\u052A", "\0", "\0")),
    ("\u052D", ("\u052C", "\0", "\0")),
    ("\u052F", ("\u052E", "\0", "\0")),
    ("\u0561", ("\u0531", "\0", "\0")),
    ("\u0562", ("\u0532", "\0", "\0")),
    ("\u0563", ("\u0533", "\0", "\0")),
    ("\u0564", ("\u0534", "\0", "\0")),
    ("\u0565", ("\u0535", "\0", "\0")),
    ("\u0566", ("\u0536", "\0", "\0")),
    ("\u0567", ("\u0537", "\0", "\0")),
    ("\u0568", ("\u0538", "\0", "\0")),
    ("\u0569", ("\u0539", "\0", "\0")),
    ("\u056A", ("\u053A", "\0", "\0")),
    ("\u056B", ("\u053B", "\0", "\0")),
    ("\u056C", ("\u053C", "\0", "\0")),
    ("\u056D", ("\u053D", "\0", "\0")),
    ("\u056E", ("\u053E", "\0", "\0")),
    ("\u056F", ("\u053F", "\0", "\0")),
    ("\u0570", ("\u0540", "\0", "\0")),
    ("\u0571", ("\u0541", "\0", "\0")),
    ("\u0572", ("\u0542", "\0", "\0")),
    ("\u0573", ("\u0543", "\0", "\0")),
    ("\u0574", ("\u0544", "\0", "\0")),
    ("\u0575", ("\u0545", "\0", "\0")),
    ("\u0576", ("\u0546", "\0", "\0")),
    ("\u0577", ("\u0547", "\0", "\0")),
    ("\u0578", ("\u0548", "\0", "\0")),
    ("\u0579", ("\u0549", "\0", "\0")),
    ("\u057A", ("\u054A", "\0", "\0")),
    ("\u057B", ("\u054B", "\0", "\0")),
    ("\u057C", ("\u054C", "\0", "\0")),
    ("\u057D", ("\u054D", "\0", "\0")),
    ("\u057E", ("\u054E", "\0", "\0")),
    ("\u057F", ("\u054F", "\0", "\0")),
    ("\u0580", ("\u0550", "\0", "\0")),
    ("\u0581", ("\u0551", "\0", "\0")),
    ("\u0582", ("\u0552", "\0", "\0")),
    ("\u0583", ("\u0553", "\0", "\0")),
    ("\u0584", ("\u0554", "\0", "\0")),
    ("\u0585", ("\u0555", "\0", "\0")),
    ("\u0586", ("\u0556", "\0", "\0")),
    ("\u0587", ("\u0535", "\u0582", "\0")),
    ("\u13F8", ("\u13F0", "\0", "\0")),
    ("\u13F9", ("\u13F1", "\0", "\0")),
    ("\u13FA", ("\u13F2", "\0", "\0")),
    ("\u13FB", ("\u13F3", "\0", "\0")),
    ("\u13FC", ("\u13F4", "\0", "\0")),
    ("\u13FD", ("\u13F5", "\0", "\0")),
    ("\u1C80", ("\u0412", "\0", "\0")),
    ("\u1C81", ("\u0414", "\0", "\0")),
    ("\u1C82", ("\u041E", "\0", "\0")),
    ("\u1C83", ("\u0421", "\0", "\0")),
    ("\u1C84", ("\u0422", "\0", "\0")),
    ("\u1C85", ("\u0422", "\0", "\0")),
    ("\u1C86", ("\u042A", "\0", "\0")),
    ("\u1C87", ("\u0462", "\0", "\0")),
    ("\u1C88", ("\uA64A", "\0", "\0")),
    ("\u1D79", ("\uA77D", "\0", "\0")),
    ("\u1D7D", ("\u2C63", "\0", "\0")),
    ("\u1D8E", ("\uA7C6", "\0", "\0")),
    ("\u1E01", ("\u1E00", "\0", "\0")),
    ("\u1E03", ("\u1E02", "\0", "\0")),
    ("\u1E05", ("\u1E04", "\0", "\0")),
    ("\u1E07", ("\u1E06", "\0", "\0")),
    ("\u1E09", ("\u1E08", "\0", "\0")),
    ("\u1E0B", ("\u1E0A", "\0", "\0")),
    ("\u1E0D", ("\u1E0C", "\0", "\0")),
    ("\u1E0F", ("\u1E0E", "\0", "\0")),
    ("\u1E11", ("\u1E10", "\0", "\0")),
    ("\u1E13", ("\u1E12", "\0", "\0")),
    ("\u1E15", ("\u1E14", "\0", "\0")),
    ("\u1E17", ("\u1E16", "\0", "\0")),
    ("\u1E19", ("\u1E18", "\0", "\0")),
    ("\u1E1B", ("\u1E1A", "\0", "\0")),
    ("\u1E1D", ("\u1E1C", "\0", "\0")),
    ("\u1E1F", ("\u1E1E", "\0", "\0")),
    ("\u1E21", ("\u1E20", "\0", "\0")),
    ("\u1E23", ("\u1E22", "\0", "\0")),
    ("\u1E25", ("\u1E24", "\0", "\0")),
    ("\u1E27", ("\u1E26", "\0", "\0")),
    ("\u1E29", ("\u1E28", "\0", "\0")),
    ("\u1E2B", ("\u1E2A", "\0", "\0")),
    ("\u1E2D", ("\u1E2C", "\0", "\0")),
    ("\u1E2F", ("\u1E2E", "\0", "\0")),
    ("\u1E31", ("\u1E30", "\0", "\0")),
    ("\u1E33", ("\u1E32", "\0", "\0")),
    ("\u1E35", ("\u1E34", "\0", "\0")),
    ("\u1E37", ("\u1E36", "\0", "\0")),
    ("\u1E39", ("\u1E38", "\0", "\0")),
    ("\u1E3B", ("\u1E3A", "\0", "\0")),
    ("\u1E3D", ("\u1E3C", "\0", "\0")),
    ("\u1E3F", ("\u1E3E", "\0", "\0")),
    ("\u1E41", ("\u1E40", "\0", "\0")),
    ("\u1E43", ("\u1E42", "\0", "\0")),
    ("\u1E45", ("\u1E44", "\0", "\0")),
    ("\u1E47", ("\u1E46", "\0", "\0")),
    ("\u1E49", ("\u1E48", "\0", "\0")),
    ("\u1E4B", ("\u1E4A", "\0", "\0")),
    ("\u1E4D", ("\u1E4C", "\0", "\0")),
    ("\u1E4F", ("\u1E4E", "\0", "\0")),
    ("\u1E51", ("\u1E50", "\0", "\0")),
    ("\u1E53", ("\u1E52", "\0", "\0")),
    ("\u1E55", ("\u1E54", "\0", "\0")),
    ("\u1E57", ("\u1E56", "\0", "\0")),
    ("\u1E59", ("\u1E58", "\0", "\0")),
    ("\u1E5B", ("\u1E5A", "\0", "\0")),
    ("\u1E5D", ("\u1E5C", "\0", "\0")),
    ("\u1E5F", ("\u1E5E", "\0", "\0")),
    ("\u1E61", ("\u1E60", "\0", "\0")),
    ("\u1E63", ("\u1E62", "\0", "\0")),
    ("\u1E65", ("\u1E64", "\0", "\0")),
    ("\u1E67", ("\u1E66", "\0", "\0")),
    ("\u1E69", ("\u1E68", "\0", "\0")),
    ("\u1E6B", ("\u1E6A", "\0", "\0")),
    ("\u1E6D", ("\u1E6C", "\0", "\0")),
    ("\u1E6F", ("\u1E6E", "\0", "\0")),
    ("\u1E71", ("\u1E70", "\0", "\0")),
    ("\u1E73", ("\u1E72", "\0", "\0")),
    ("\u1E75", ("\u1E74", "\0", "\0")),
    ("\u1E77", ("\u1E76", "\0", "\0")),
    ("\u1E79", ("\u1E78", "\0", "\0")),
    ("\u1E7B", ("\u1E7A", "\0", "\0")),
    ("\u1E7D", ("\u1E7C", "\0", "\0")),
    ("\u1E7F", ("\u1E7E", "\0", "\0")),
    ("\u1E81", ("\u1E80", "\0", "\0")),
    ("\u1E83", ("\u1E82", "\0", "\0")),
    ("\u1E85", ("\u1E84", "\0", "\0")),
    ("\u1E87", ("\u1E86", "\0", "\0")),
    ("\u1E89", ("\u1E88", "\0", "\0")),
    ("\u1E8B", ("\u1E8A", "\0", "\0")),
    ("\u1E8D", ("\u1E8C", "\0", "\0")),
    ("\u1E8F", ("\u1E8E", "\0", "\0")),
    ("\u1E91", ("\u1E90", "\0", "\0")),
    ("\u1E93", ("\u1E92", "\0", "\0")),
    ("\u1E95", ("\u1E94", "\0", "\0")),
    ("\u1E96", ("\u0048", "\u0331", "\0")),
    ("\u1E97", ("\u0054", "\u0308", "\0")),
    ("\u1E98", ("\u0057", "\u030A", "\0")),
    ("\u1E99", ("\u0059", "\u030A", "\0")),
    ("\u1E9A", ("\u0041", "\u02BE", "\0")),
    ("\u1E9B", ("\u1E60", "\0", "\0")),
    ("\u1EA1", ("\u1EA0", "\0", "\0")),
    ("\u1EA3", ("\u1EA2", "\0", "\0")),
    ("\u1EA5", ("\u1EA4", "\0", "\0")),
    ("\u1EA7", ("\u1EA6", "\0", "\0")),
    ("\u1EA9", ("\u1EA8", "\0", "\0")),
    ("\u1EAB", ("\u1EAA", "\0", "\0")),
    ("\u1EAD", ("\u1EAC", "\0", "\0")),
    ("\u1EAF", ("\u1EAE", "\0", "\0")),
    ("\u1EB1", ("\u1EB0", "\0", "\0")),
    ("\u1EB3", ("\u1EB2", "\0", "\0")),
    ("\u1EB5", ("\u1EB4", "\0", "\0")),
    ("\u1EB7", ("\u1EB6", "\0", "\0")),
    ("\u1EB9", ("\u1EB8", "\0", "\0")),
    ("\u1EBB", ("\u1EBA", "\0", "\0")),
    ("\u1EBD", ("\u1EBC", "\0", "\0")),
    ("\u1EBF", ("\u1EBE", "\0", "\0")),
    ("\u1EC1", ("\u1EC0", "\0", "\0")),
    ("\u1EC3", ("\u1EC2", "\0", "\0")),
    ("\u1EC5", ("\u1EC4", "\0", "\0")),
    ("\u1EC7", ("\u1EC6", "\0", "\0")),
    ("\u1EC9", ("\u1EC8", "\0", "\0")),
    ("\u1ECB", ("\u1ECA", "\0", "\0")),
    ("\u1ECD", ("\u1ECC", "\0", "\0")),
    ("\u1ECF", ("\u1ECE", "\0", "\0")),
    ("\u1ED1", ("\u1ED0", "\0", "\0")),
    ("\u1ED3", ("\u1ED2", "\0", "\0")),
    ("\u1ED5", ("\u1ED4", "\0", "\0")),
    ("\u1ED7", ("\u1ED6", "\0", "\0")),
    ("\u1ED9", ("\u1ED8", "\0", "\0")),
    ("\u1EDB", ("\u1EDA", "\0", "\0")),
    ("\u1EDD", ("\u1EDC", "\0", "\0")),
    ("\u1EDF", ("\u1EDE", "\0", "\0")),
    ("\u1EE1", ("\u1EE0", "\0", "\0")),
    ("\u1EE3", ("\u1EE2", "\0", "\0")),
    ("\u1EE5", ("\u1EE4", "\0", "\0")),
    ("\u1EE7", ("\u1EE6", "\0", "\0")),
    ("\u1EE9", ("\u1EE8", "\0", "\0")),
    ("\u1EEB", ("\u1EEA", "\0", "\0")),
    ("\u1EED", ("\u1EEC", "\0", "\0")),
    ("\u1EEF", ("\u1EEE", "\0", "\0")),
    ("\u1EF1", ("\u1EF0", "\0", "\0")),
    ("\u1EF3", ("\u1EF2", "\0", "\0")),
    ("\u1EF5", ("\u1EF4", "\0", "\0")),
    ("\u1EF7", ("\u1EF6", "\0", "\0")),
    ("\u1EF9", ("\u1EF8", "\0", "\0")),
    ("\u1EFB", ("\u1EFA", "\0", "\0")),
    ("\u1EFD", ("\u1EFC", "\0", "\0")),
    ("\u1EFF", ("\u1EFE", "\0", "\0")),
    ("\u1F00", ("\u1F08", "\0", "\0")),
    ("\u1F01", ("\u1F09", "\0", "\0")),
    ("\u1F02", ("\u1F0A", "\0", "\0")),
    ("\u1F03", ("\u1F0B", "\0", "\0")),
    ("\u1F04", ("\u1F0C", "\0", "\0")),
    ("\u1F05", ("\u1F0D", "\0", "\0")),
    ("\u1F06", ("\u1F0E", "\0", "\0")),
    ("\u1F07", ("\u1F0F", "\0", "\0")),
    ("\u1F10", ("\u1F18", "\0", "\0")),
    ("\u1F11", ("\u1F19", "\0", "\0")),
    ("\u1F12", ("\u1F1A", "\0", "\0")),
    ("\u1F13", ("\u1F1B", "\0", "\0")),
    ("\u1F14", ("\u1F1C", "\0", "\0")),
    ("\u1F15", ("\u1F1D", "\0", "\0")),
    ("\u1F20", ("\u1F28", "\0", "\0")),
    ("\u1F21", ("\u1F29", "\0", "\0")),
    ("\u1F22", ("\u1F2A", "\0", "\0")),
    ("\u1F23", ("\u1F2B", "\0", "\0")),
    ("\u1F24", ("\u1F2C", "\0", "\0")),
    ("\u1F25", ("\u1F2D", "\0", "\0")),
    ("\u1F26", ("\u1F2E", "\0", "\0")),
    ("\u1F27", ("\u1F2F", "\0", "\0")),
    ("\u1F30", ("\u1F38", "\0", "\0")),
    ("\u1F31", ("\u1F39", "\0", "\0")),
    ("\u1F32", ("\u1F3A", "\0", "\0")),
    ("\u1F33", ("\u1F3B", "\0", "\0")),
    ("\u1F34", ("\u1F3C", "\0", "\0")),
    ("\u1F35", ("\u1F3D", "\0", "\0")),
    ("\u1F36", ("\u1F3E", "\0", "\0")),
    ("\u1F37", ("\u1F3F", "\0", "\0")),
    ("\u1F40", ("\u1F48", "\0", "\0")),
    ("\u1F41", ("\u1F49", "\0", "\0")),
    ("\u1F42", ("\u1F4A", "\0", "\0")),
    ("\u1F43", ("\u1F4B", "\0", "\0")),
    ("\u1F44", ("\u1F4C", "\0", "\0")),
    ("\u1F45", ("\u1F4D", "\0", "\0")),
    ("\u1F50", ("\u03A5", "\u0313", "\0")),
    ("\u1F51", ("\u1F59", "\0", "\0")),
    ("\u1F52", ("\u03A5", "\u0313", "\u0300")),
    ("\u1F53", ("\u1F5B", "\0", "\0")),
    ("\u1F54", ("\u03A5", "\u0313", "\u0301")),
    ("\u1F55", ("\u1F5D", "\0", "\0")),
    ("\u1F56", ("\u03A5", "\u0313", "\u0342")),
    ("\u1F57", ("\u1F5F", "\0", "\0")),
    ("\u1F60", ("\u1F68", "\0", "\0")),
    ("\u1F61", ("\u1F69", "\0", "\0")),
    ("\u1F62", ("\u1F6A", "\0", "\0")),
    ("\u1F63", ("\u1F6B", "\0", "\0")),
    ("\u1F64", ("\u1F6C", "\0", "\0")),
    ("\u1F65", ("\u1F6D", "\0", "\0")),
    ("\u1F66", ("\u1F6E", "\0", "\0")),
    ("\u1F67", ("\u1F6F", "\0", "\0")),
    ("\u1F70", ("\u1FBA", "\0", "\0")),
    ("\u1F71", ("\u1FBB", "\0", "\0")),
    ("\u1F72", ("\u1FC8", "\0", "\0")),
    ("\u1F73", ("\u1FC9", "\0", "\0")),
    ("\u1F74", ("\u1FCA", "\0", "\0")),
    ("\u1F75", ("\u1FCB", "\0", "\0")),
    ("\u1F76", ("\u1FDA", "\0", "\0")),
    ("\u1F77", ("\u1FDB", "\0", "\0")),
    ("\u1F78", ("\u1FF8", "\0", "\0")),
    ("\u1F79", ("\u1FF9", "\0", "\0")),
    ("\u1F7A", ("\u1FEA", "\0", "\0")),
    ("\u1F7B", ("\u1FEB", "\0", "\0")),
    ("\u1F7C", ("\u1FFA", "\0", "\0")),
    ("\u1F7D", ("\u1FFB", "\0", "\0")),
    ("\u1F80", ("\u1F88", "\0", "\0")),
    ("\u1F81", ("\u1F89", "\0", "\0")),
    ("\u1F82", ("\u1F8A", "\0", "\0")),
    ("\u1F83", ("\u1F8B", "\0", "\0")),
    ("\u1F84", ("\u1F8C", "\0", "\0")),
    ("\u1F85", ("\u1F8D", "\0", "\0")),
    ("\u1F86", ("\u1F8E", "\0", "\0")),
    ("\u1F87", ("\u1F8F", "\0", "\0")),
    ("\u1F90", ("\u1F98", "\0", "\0")),
    ("\u1F91", ("\u1F99", "\0", "\0")),
    ("\u1F92", ("\u1F9A", "\0", "\0")),
    ("\u1F93", ("\u1F9B", "\0", "\0")),
    ("\u1F94", ("\u1F9C", "\0", "\0")),
    ("\u1F95", ("\u1F9D", "\0", "\0")),
    ("\u1F96", ("\u1F9E", "\0", "\0")),
    ("\u1F97", ("\u1F9F", "\0", "\0")),
    ("\u1FA0", ("\u1FA8", "\0", "\0")),
    ("\u1FA1", ("\u1FA9", "\0", "\0")),
    ("\u1FA2", ("\u1FAA", "\0", "\0")),
    ("\u1FA3", ("\u1FAB", "\0", "\0")),
    ("\u1FA4", ("\u1FAC", "\0", "\0")),
    ("\u1FA5", ("\u1FAD", "\0", "\0")),
    ("\u1FA6", ("\u1FAE", "\0", "\0")),
    ("\u1FA7", ("\u1FAF", "\0", "\0")),
    ("\u1FB0", ("\u1FB8", "\0", "\0")),
    ("\u1FB1", ("\u1FB9", "\0", "\0")),
    ("\u1FB2", ("\u1FBA", "\u0345", "\0")),
    ("\u1FB3", ("\u1FBC", "\0", "\0")),
    ("\u1FB4", ("\u0386", "\u0345", "\0")),
    ("\u1FB6", ("\u0391", "\u0342", "\0")),
    ("\u1FB7", ("\u0391", "\u0342", "\u0345")),
    ("\u1FBE", ("\u0399", "\0", "\0")),
    ("\u1FC2", ("\u1FCA", "\u0345", "\0")),
    ("\u1FC3", ("\u1FCC", "\0", "\0")),
    ("\u1FC4", ("\u0389", "\u0345", "\0")),
    ("\u1FC6", ("\u0397", "\u0342", "\0")),
    ("\u1FC7", ("\u0397", "\u0342", "\u0345")),
    ("\u1FD0", ("\u1FD8", "\0", "\0")),
    ("\u1FD1", ("\u1FD9", "\0", "\0")),
    ("\u1FD2", ("\u0399", "\u0308", "\u0300")),
    ("\u1FD3", ("\u0399", "\u0308", "\u0301")),
    ("\u1FD6", ("\u0399", "\u0342", "\0")),
    ("\u1FD7", ("\u0399", "\u0308", "\u0342")),
    ("\u1FE0", ("\u1FE8", "\0", "\0")),
    ("\u1FE1", ("\u1FE9", "\0", "\0")),
    ("\u1FE2", ("\u03A5", "\u0308", "\u0300")),
    ("\u1FE3", ("\u03A5", "\u0308", "\u0301")),
    ("\u1FE4", ("\u03A1", "\u0313", "\0")),
    ("\u1FE5", ("\u1FEC", "\0", "\0")),
    ("\u1FE6", ("\u03A5", "\u0342", "\0")),
    ("\u1FE7", ("\u03A5", "\u0308", "\u0342")),
    ("\u1FF2", ("\u1FFA", "\u0345", "\0")),
    ("\u1FF3", ("\u1FFC", "\0", "\0")),
    ("\u1FF4", ("\u038F", "\u0345", "\0")),
    ("\u1FF6", ("\u03A9", "\u0342", "\0")),
    ("\u1FF7", ("\u03A9", "\u0342", "\u0345")),
    ("\u214E", ("\u2132", "\0", "\0")),
    ("\u2170", ("\u2160", "\0", "\0")),
    ("\u2171", ("\u2161", "\0", "\0")),
    ("\u2172", ("\u2162", "\0", "\0")),
    ("\u2173", ("\u2163", "\0", "\0")),
    ("\u2174", ("\u2164", "\0", "\0")),
    ("\u2175", ("\u2165", "\0", "\0")),
    ("\u2176", ("\u2166", "\0", "\0")),
    ("\u2177", ("\u2167", "\0", "\0")),
    ("\u2178", ("\u2168", "\0", "\0")),
    ("\u2179", ("\u2169", "\0", "\0")),
    ("\u217A", ("\u216A", "\0", "\0")),
    ("\u217B", ("\u216B", "\0", "\0")),
    ("\u217C", ("\u216C", "\0", "\0")),
    ("\u217D", ("\u216D", "\0", "\0")),
    ("\u217E", ("\u216E", "\0", "\0")),
    ("\u217F", ("\u216F", "\0", "\0")),
    ("\u2184", ("\u2183", "\0", "\0")),
    ("\u24D0", ("\u24B6", "\0", "\0")),
    ("\u24D1", ("\u24B7", "\0", "\0")),
    ("\u24D2", ("\u24B8", "\0", "\0")),
    ("\u24D3", ("\u24B9", "\0", "\0")),
    ("\u24D4", ("\u24BA", "\0", "\0")),
    ("\u24D5", ("\u24BB", "\0", "\0")),
    ("\u24D6", ("\u24BC", "\0", "\0")),
    ("\u24D7", ("\u24BD", "\0", "\0")),
    ("\u24D8", ("\u24BE", "\0", "\0")),
    ("\u24D9", ("\u24BF", "\0", "\0")),
    ("\u24DA", ("\u24C0", "\0", "\0")),
    ("\u24DB", ("\u24C1", "\0", "\0")),
    ("\u24DC", ("\u24C2", "\0", "\0")),
    ("\u24DD", ("\u24C3", "\0", "\0")),
    ("\u24DE", ("\u24C4", "\0", "\0")),
    ("\u24DF", ("\u24C5", "\0", "\0")),
    ("\u24E0", ("\u24C6", "\0", "\0")),
    ("\u24E1", ("\u24C7", "\0", "\0")),
    ("\u24E2", ("\u24C8", "\0", "\0")),
    ("\u24E3", ("\u24C9", "\0", "\0")),
    ("\u24E4", ("\u24CA", "\0", "\0")),
    ("\u24E5", ("\u24CB", "\0", "\0")),
    ("\u24E6", ("\u24CC", "\0", "\0")),
    ("\u24E7", ("\u24CD", "\0", "\0")),
    ("\u24E8", ("\u24CE", "\0", "\0")),
    ("\u24E9", ("\u24CF", "\0", "\0")),
    ("\u2C30", ("\u2C00", "\0", "\0")),
    ("\u2C31", ("\u2C01", "\0", "\0")),
    ("\u2C32", ("\u2C02", "\0", "\0")),
    ("\u2C33", ("\u2C03", "\0", "\0")),
    ("\u2C34", ("\u2C04", "\0", "\0")),
    ("\u2C35", ("\u2C05", "\0", "\0")),
    ("\u2C36", ("\u2C06", "\0", "\0")),
    ("\u2C37", ("\u2C07", "\0", "\0")),
    ("\u2C38", ("\u2C08", "\0", "\0")),
    ("\u2C39", ("\u2C09", "\0", "\0")),
    ("\u2C3A", ("\u2C0A", "\0", "\0")),
    ("\u2C3B", ("\u2C0B", "\0", "\0")),
    ("\u2C3C", ("\u2C0C", "\0", "\0")),
    ("\u2C3D", ("\u2C0D", "\0", "\0")),
    ("\u2C3E", ("\u2C0E", "\0", "\0")),
    ("\u2C3F", ("\u2C0F", "\0", "\0")),
    ("\u2C40", ("\u2C10", "\0", "\0")),
    ("\u2C41", ("\u2C11", "\0", "\0")),
    ("\u2C42", ("\u2C12", "\0", "\0")),
    ("\u2C43", ("\u2C13", "\0", "\0")),
    ("\u2C44", ("\u2C14", "\0", "\0")),
    ("\u2C45", ("\u2C15", "\0", "\0")),
    ("\u2C46", ("\u2C16", "\0", "\0")),
    ("\u2C47", ("\u2C17", "\0", "\0")),
    ("\u2C48", ("\u2C18", "\0", "\0")),
    ("\u2C49", ("\u2C19", "\0", "\0")),
    ("\u2C4A", ("\u2C1A", "\0", "\0")),
    ("\u2C4B", ("\u2C1B", "\0", "\0")),
    ("\u2C4C", ("\u2C1C", "\0", "\0")),
    ("\u2C4D", ("\u2C1D", "\0", "\0")),
    ("\u2C4E", ("\u2C1E", "\0", "\0")),
    ("\u2C4F", ("\u2C1F", "\0", "\0")),
    ("\u2C50", ("\u2C20", "\0", "\0")),
    ("\u2C51", ("\u2C21", "\0", "\0")),
    ("\u2C52", ("\u2C22", "\0", "\0")),
    ("\u2C53", ("\u2C23", "\0", "\0")),
    ("\u2C54", ("\u2C24", "\0", "\0")),
    ("\u2C55", ("\u2C25", "\0", "\0")),
    ("\u2C56", ("\u2C26", "\0", "\0")),
    ("\u2C57", ("\u2C27", "\0", "\0")),
    ("\u2C58", ("\u2C28", "\0", "\0")),
    ("\u2C59", ("\u2C29", "\0", "\0")),
    ("\u2C5A", ("\u2C2A", "\0", "\0")),
    ("\u2C5B", ("\u2C2B", "\0", "\0")),
    ("\u2C5C", ("\u2C2C", "\0", "\0")),
    ("\u2C5D", ("\u2C2D", "\0", "\0")),
    ("\u2C5E", ("\u2C2E", "\0", "\0")),
    ("\u2C5F", ("\u2C2F", "\0", "\0")),
    ("\u2C61", ("\u2C60", "\0", "\0")),
    ("\u2C65", ("\u023A", "\0", "\0")),
    ("\u2C66", ("\u023E", "\0", "\0")),
    ("\u2C68", ("\u2C67", "\0", "\0")),
    ("\u2C6A", ("\u2C69", "\0", "\0")),
    ("\u2C6C", ("\u2C6B", "\0", "\0")),
    ("\u2C73", ("\u2C72", "\0", "\0")),
    ("\u2C76", ("\u2C75", "\0", "\0")),
    ("\u2C81", ("\u2C80", "\0", "\0")),
    ("\u2C83", ("\u2C82", "\0", "\0")),
    ("\u2C85", ("\u2C84", "\0", "\0")),
    ("\u2C87", ("\u2C86", "\0", "\0")),
    ("\u2C89", ("\u2C88", "\0", "\0")),
    ("\u2C8B", ("\u2C8A", "\0", "\0")),
    ("\u2C8D", ("\u2C8C", "\0", "\0")),
    ("\u2C8F", ("\u2C8E", "\0", "\0")),
    ("\u2C91", ("\u2C90", "\0", "\0")),
    ("\u2C93", ("\u2C92", "\0", "\0")),
    ("\u2C95", ("\u2C94", "\0", "\0")),
    ("\u2C97", ("\u2C96", "\0", "\0")),
    ("\u2C99", ("\u2C98", "\0", "\0")),
    ("\u2C9B", ("\u2C9A", "\0", "\0")),
    ("\u2C9D", ("\u2C9C", "\0", "\0")),
    ("\u2C9F", ("\u2C9E", "\0", "\0")),
    ("\u2CA1", ("\u2CA0", "\0", "\0")),
    ("\u2CA3", ("\u2CA2", "\0", "\0")),
    ("\u2CA5", ("\u2CA4", "\0", "\0")),
    ("\u2CA7", ("\u2CA6", "\0", "\0")),
    ("\u2CA9", ("\u2CA8", "\0", "\0")),
    ("\u2CAB", ("\u2CAA", "\0", "\0")),
    ("\u2CAD", ("\u2CAC", "\0", "\0")),
    ("\u2CAF", ("\u2CAE", "\0", "\0")),
    ("\u2CB1", ("\u2CB0", "\0", "\0")),
    ("\u2CB3", ("\u2CB2", "\0", "\0")),
    ("\u2CB5", ("\u2CB4", "\0", "\0")),
    ("\u2CB7", ("\u2CB6", "\0", "\0")),
    ("\u2CB9", ("\u2CB8", "\0", "\0")),
    ("\u2CBB", ("\u2CBA", "\0", "\0")),
    ("\u2CBD", ("\u2CBC", "\0", "\0")),
    ("\u2CBF", ("\u2CBE", "\0", "\0")),
    ("\u2CC1", ("\u2CC0", "\0", "\0")),
    ("\u2CC3", ("\u2CC2", "\0", "\0")),
    ("\u2CC5", ("\u2CC4", "\0", "\0")),
    ("\u2CC7", ("\u2CC6", "\0", "\0")),
    ("\u2CC9", ("\u2CC8", "\0", "\0")),
    ("\u2CCB", ("\u2CCA", "\0", "\0")),
    ("\u2CCD", ("\u2CCC", "\0", "\0")),
    ("\u2CCF", ("\u2CCE", "\0", "\0")),
    ("\u2CD1", ("\u2CD0", "\0", "\0")),
    ("\u2CD3", ("\u2CD2", "\0", "\0")),
    ("\u2CD5", ("\u2CD4", "\0", "\0")),
    ("\u2CD7", ("\u2CD6", "\0", "\0")),
    ("\u2CD9", ("\u2CD8", "\0", "\0")),
    ("\u2CDB", ("\u2CDA", "\0", "\0")),
    ("\u2CDD", ("\u2CDC", "\0", "\0")),
    ("\u2CDF", ("\u2CDE", "\0", "\0")),
    ("\u2CE1", ("\u2CE0", "\0", "\0")),
    ("\u2CE3", ("\u2CE2", "\0", "\0")),
    ("\u2CEC", ("\u2CEB", "\0", "\0")),
    ("\u2CEE", ("\u2CED", "\0", "\0")),
    ("\u2CF3", ("\u2CF2", "\0", "\0")),
    ("\u2D00", ("\u10A0", "\0", "\0")),
    ("\u2D01", ("\u10A1", "\0", "\0")),
    ("\u2D02", ("\u10A2", "\0", "\0")),
    ("\u2D03", ("\u10A3", "\0", "\0")),
    ("\u2D04", ("\u10A4", "\0", "\0")),
    ("\u2D05", ("\u10A5", "\0", "\0")),
    ("\u2D06", ("\u10A6", "\0", "\0")),
    ("\u2D07", ("\u10A7", "\0", "\0")),
    ("\u2D08", ("\u10A8", "\0", "\0")),
    ("\u2D09", ("\u10A9", "\0", "\0")),
    ("\u2D0A", ("\u10AA", "\0", "\0")),
    ("\u2D0B", ("\u10AB", "\0", "\0")),
    ("\u2D0C", ("\u10AC", "\0", "\0")),
    ("\u2D0D", ("\u10AD", "\0", "\0")),
    ("\u2D0E", ("\u10AE", "\0", "\0")),
    ("\u2D0F", ("\u10AF", "\0", "\0")),
    ("\u2D10", ("\u10B0", "\0", "\0")),
    ("\u2D11", ("\u10B1", "\0", "\0")),
    ("\u2D12", ("\u10B2", "\0", "\0")),
    ("\u2D13", ("\u10B3", "\0", "\0")),
    ("\u2D14", ("\u10B4", "\0", "\0")),
    ("\u2D15", ("\u10B5", "\0", "\0")),
    ("\u2D16", ("\u10B6", "\0", "\0")),
    ("\u2D17", ("\u10B7", "\0", "\0")),
    ("\u2D18", ("\u10B8", "\0", "\0")),
    ("\u2D19", ("\u10B9", "\0", "\0")),
    ("\u2D1A", ("\u10BA", "\0", "\0")),
    ("\u2D1B", ("\u10BB", "\0", "\0")),
    ("\u2D1C", ("\u10BC", "\0", "\0")),
    ("\u2D1D", ("\u10BD", "\0", "\0")),
    ("\u2D1E", ("\u10BE", "\0", "\0")),
    ("\u2D1F", ("\u10BF", "\0", "\0")),
    ("\u2D20", ("\u10C0", "\0", "\0")),
    ("\u2D21", ("\u10C1", "\0", "\0")),
    ("\u2D22", ("\u10C2", "\0", "\0")),
    ("\u2D23", ("\u10C3", "\0", "\0")),
    ("\u2D24", ("\u10C4", "\0", "\0")),
    ("\u2D25", ("\u10C5", "\0", "\0")),
    ("\u2D27", ("\u10C7", "\0", "\0")),
    ("\u2D2D", ("\u10CD", "\0", "\0")),
    ("\uA641", ("\uA640", "\0", "\0")),
    ("\uA643", ("\uA642", "\0", "\0")),
    ("\uA645", ("\uA644", "\0", "\0")),
    ("\uA647", ("\uA646", "\0", "\0")),
    ("\uA649", ("\uA648", "\0", "\0")),
    ("\uA64B", ("\uA64A", "\0", "\0")),
    ("\uA64D", ("\uA64C", "\0", "\0")),
    ("\uA64F", ("\uA64E", "\0", "\0")),
    ("\uA651", ("\uA650", "\0", "\0")),
    ("\uA653", ("\uA652", "\0", "\0")),
    ("\uA655", ("\uA654", "\0", "\0")),
    ("\uA657", ("\uA656", "\0", "\0")),
    ("\uA659", ("\uA658", "\0", "\0")),
    ("\uA65B", ("\uA65A", "\0", "\0")),
    ("\uA65D", ("\uA65C", "\0", "\0")),
    ("\uA65F", ("\uA65E", "\0", "\0")),
    ("\uA661", ("\uA660", "\0", "\0")),
    ("\uA663", ("\uA662", "\0", "\0")),
    ("\uA665", ("\uA664", "\0", "\0")),
    ("\uA667", ("\uA666", "\0", "\0")),
    ("\uA669", ("\uA668", "\0", "\0")),
    ("\uA66B", ("\uA66A", "\0", "\0")),
    ("\uA66D", ("\uA66C", "\0", "\0")),
    ("\uA681", ("\uA680", "\0", "\0")),
    ("\uA683", ("\uA682", "\0", "\0")),
    ("\uA685", ("\uA684", "\0", "\0")),
    ("\uA687", ("\uA686", "\0", "\0")),
    ("\uA689", ("\uA688", "\0", "\0")),
    ("\uA68B", ("\uA68A", "\0", "\0")),
    ("\uA68D", ("\uA68C", "\0", "\0")),
    ("\uA68F", ("\uA68E", "\0", "\0")),
    ("\uA691", ("\uA690", "\0", "\0")),
    ("\uA693", ("\uA692", "\0", "\0")),
    ("\uA695", ("\uA694", "\0", "\0")),
    ("\uA697", ("\uA696", "\0", "\0")),
    ("\uA699", ("\uA698", "\0", "\0")),
    ("\uA69B", ("\uA69A", "\0", "\0")),
    ("\uA723", ("\uA722", "\0", "\0")),
    ("\uA725", ("\uA724", "\0", "\0")),
    ("\uA727", ("\uA726", "\0", "\0")),
    ("\uA729", ("\uA728", "\0", "\0")),
    ("\uA72B", ("\uA72A", "\0", "\0")),
    ("\uA72D", ("\uA72C", "\0", "\0")),
    ("\uA72F", ("\uA72E", "\0", "\0")),
    ("\uA733", ("\uA732", "\0", "\0")),
    ("\uA735", ("\uA734", "\0", "\0")),
    ("\uA737", ("\uA736", "\0", "\0")),
    ("\uA739", ("\uA738", "\0", "\0")),
    ("\uA73B", ("\uA73A", "\0", "\0")),
    ("\uA73D", ("\uA73C", "\0", "\0")),
    ("\uA73F", ("\uA73E", "\0", "\0")),
    ("\uA741", ("\uA740", "\0", "\0")),
    ("\uA743", ("\uA742", "\0", "\0")),
    ("\uA745", ("\uA744", "\0", "\0")),
    ("\uA747", ("\uA746", "\0", "\0")),
    ("\uA749", ("\uA748", "\0", "\0")),
    ("\uA74B", ("\uA74A", "\0", "\0")),
    ("\uA74D", ("\uA74C", "\0", "\0")),
    ("\uA74F", ("\uA74E", "\0", "\0")),
    ("\uA751", ("\uA750", "\0", "\0")),
    ("\uA753", ("\uA752", "\0", "\0")),
    ("\uA755", ("\uA754", "\0", "\0")),
    ("\uA757", ("\uA756", "\0", "\0")),
    ("\uA759", ("\uA758", "\0", "\0")),
    ("\uA75B", ("\uA75A", "\0", "\0")),
    ("\uA75D", ("\uA75C", "\0", "\0")),
    ("\uA75F", ("\uA75E", "\0", "\0")),
    ("\uA761", ("\uA760", "\0", "\0")),
    ("\uA763", ("\uA762", "\0", "\0")),
    ("\uA765", ("\uA764", "\0", "\0")),
    ("\uA767", ("\uA766", "\0", "\0")),
    ("\uA769", ("\uA768", "\0", "\0")),
    ("\uA76B", ("\uA76A", "\0", "\0")),
    ("\uA76D", ("\uA76C", "\0", "\0")),
    ("\uA76F", ("\uA76E", "\0", "\0")),
    ("\uA77A", ("\uA779", "\0", "\0")),
    ("\uA77C", ("\uA77B", "\0", "\0")),
    ("\uA77F", ("\uA77E", "\0", "\0")),
    ("\uA781", ("\uA780", "\0", "\0")),
    ("\uA783", ("\uA782", "\0", "\0")),
    ("\uA785", ("\uA784", "\0", "\0")),
    ("\uA787", ("\uA786", "\0", "\0")),
    ("\uA78C", ("\uA78B", "\0", "\0")),
    ("\uA791", ("\uA790", "\0", "\0")),
    ("\uA793", ("\uA792", "\0", "\0")),
    ("\uA794", ("\uA7C4", "\0", "\0")),
    ("\uA797", ("\uA796", "\0", "\0")),
    ("\uA799", ("\uA798", "\0", "\0")),
    ("\uA79B", ("\uA79A", "\0", "\0")),
    ("\uA79D", ("\uA79C", "\0", "\0")),
    ("\uA79F", ("\uA79E", "\0", "\0")),
    ("\uA7A1", ("\uA7A0", "\0", "\0")),
    ("\uA7A3", ("\uA7A2", "\0", "\0")),
    ("\uA7A5", ("\uA7A4", "\0", "\0")),
    ("\uA7A7", ("\uA7A6", "\0", "\0")),
    ("\uA7A9", ("\uA7A8", "\0", "\0")),
    ("\uA7B5", ("\uA7B4", "\0", "\0")),
    ("\uA7B7", ("\uA7B6", "\0", "\0")),
    ("\uA7B9", ("\uA7B8", "\0", "\0")),
    ("\uA7BB", ("\uA7BA", "\0", "\0")),
    ("\uA7BD", ("\uA7BC", "\0", "\0")),
    ("\uA7BF", ("\uA7BE", "\0", "\0")),
    ("\uA7C1", ("\uA7C0", "\0", "\0")),
    ("\uA7C3", ("\uA7C2", "\0", "\0")),
    ("\uA7C8", ("\uA7C7", "\0", "\0")),
    ("\uA7CA", ("\uA7C9", "\0", "\0")),
    ("\uA7D1", ("\uA7D0", "\0", "\0")),
    ("\uA7D7", ("\uA7D6", "\0", "\0")),
    ("\uA7D9", ("\uA7D8", "\0", "\0")),
    ("\uA7F6", ("\uA7F5", "\0", "\0")),
    ("\uAB53", ("\uA7B3", "\0", "\0")),
    ("\uAB70", ("\u13A0", "\0", "\0")),
    ("\uAB71", ("\u13A1", "\0", "\0")),
    ("\uAB72", ("\u13A2", "\0", "\0")),
    ("\uAB73", ("\u13A3", "\0", "\0")),
    ("\uAB74", ("\u13A4", "\0", "\0")),
    ("\uAB75", ("\u13A5", "\0", "\0")),
    ("\uAB76", ("\u13A6", "\0", "\0")),
    ("\uAB77", ("\u13A7", "\0", "\0")),
    ("\uAB78", ("\u13A8", "\0", "\0")),
    ("\uAB79", ("\u13A9", "\0", "\0")),
    ("\uAB7A", ("\u13AA", "\0", "\0")),
    ("\uAB7B", ("\u13AB", "\0", "\0")),
    ("\uAB7C", ("\u13AC", "\0", "\0")),
    ("\uAB7D", ("\u13AD", "\0", "\0")),
    ("\uAB7E", ("\u13AE", "\0", "\0")),
    ("\uAB7F", ("\u13AF", "\0", "\0")),
    ("\uAB80", ("\u13B0", "\0", "\0")),
    ("\uAB81", ("\u13B1", "\0", "\0")),
    ("\uAB82", ("\u13B2", "\0", "\0")),
    ("\uAB83", ("\u13B3", "\0", "\0")),
    ("\uAB84", ("\u13B4", "\0", "\0")),
    ("\uAB85", ("\u13B5", "\0", "\0")),
    ("\uAB86", ("\u13B6", "\0", "\0")),
    ("\uAB87", ("\u13B7", "\0", "\0")),
    ("\uAB88", ("\u13B8", "\0", "\0")),
    ("\uAB89", ("\u13B9", "\0", "\0")),
    ("\uAB8A", ("\u13BA", "\0", "\0")),
    ("\uAB8B", ("\u13BB", "\0", "\0")),
    ("\uAB8C", ("\u13BC", "\0", "\0")),
    ("\uAB8D", ("\u13BD", "\0", "\0")),
    ("\uAB8E", ("\u13BE", "\0", "\0")),
    ("\uAB8F", ("\u13BF", "\0", "\0")),
    ("\uAB90", ("\u13C0", "\0", "\0")),
    ("\uAB91", ("\u13C1", "\0", "\0")),
    ("\uAB92", ("\u13C2", "\0", "\0")),
    ("\uAB93", ("\u13C3", "\0", "\0")),
    ("\uAB94", ("\u13C4", "\0", "\0")),
    ("\uAB95", ("\u13C5", "\0", "\0")),
    ("\uAB96", ("\u13C6", "\0", "\0")),
    ("\uAB97", ("\u13C7", "\0", "\0")),
    ("\uAB98", ("\u13C8", "\0", "\0")),
    ("\uAB99", ("\u13C9", "\0", "\0")),
    ("\uAB9A", ("\u13CA", "\0", "\0")),
    ("\uAB9B", ("\u13CB", "\0", "\0")),
    ("\uAB9C", ("\u13CC", "\0", "\0")),
    ("\uAB9D", ("\u13CD", "\0", "\0")),
    ("\uAB9E", ("\u13CE", "\0", "\0")),
    ("\uAB9F", ("\u13CF", "\0", "\0")),
    ("\uABA0", ("\u13D0", "\0", "\0")),
    ("\uABA1", ("\u13D1", "\0", "\0")),
    ("\uABA2", ("\u13D2", "\0", "\0")),
    ("\uABA3", ("\u13D3", "\0", "\0")),
    ("\uABA4", ("\u13D4", "\0", "\0")),
    ("\uABA5", ("\u13D5", "\0", "\0")),
    ("\uABA6", ("\u13D6", "\0", "\0")),
    ("\uABA7", ("\u13D7", "\0", "\0")),
    ("\uABA8", ("\u13D8", "\0", "\0")),
    ("\uABA9", ("\u13D9", "\0", "\0")),
    ("\uABAA", ("\u13DA", "\0", "\0")),
    ("\uABAB", ("\u13DB", "\0", "\0")),
    ("\uABAC", ("\u13DC", "\0", "\0")),
    ("\uABAD", ("\u13DD", "\0", "\0")),
    ("\uABAE", ("\u13DE", "\0", "\0")),
    ("\uABAF", ("\u13DF", "\0", "\0")),
    ("\uABB0", ("\u13E0", "\0", "\0")),
    ("\uABB1", ("\u13E1", "\0", "\0")),
    ("\uABB2", ("\u13E2", "\0", "\0")),
    ("\uABB3", ("\u13E3", "\0", "\0")),
    ("\uABB4", ("\u13E4", "\0", "\0")),
    ("\uABB5", ("\u13E5", "\0", "\0")),
    ("\uABB6", ("\u13E6", "\0", "\0")),
    ("\uABB7", ("\u13E7", "\0", "\0")),
    ("\uABB8", ("\u13E8", "\0", "\0")),
    ("\uABB9", ("\u13E9", "\0", "\0")),
    ("\uABBA", ("\u13EA", "\0", "\0")),
    ("\uABBB", ("\u13EB", "\0", "\0")),
    ("\uABBC", ("\u13EC", "\0", "\0")),
    ("\uABBD", ("\u13ED", "\0", "\0")),
    ("\uABBE", ("\u13EE", "\0", "\0")),
    ("\uABBF", ("\u13EF", "\0", "\0")),
    ("\uFB00", ("\u0046", "\u0066", "\0")),
    ("\uFB01", ("\u0046", "\u0069", "\0")),
    ("\uFB02", ("\u0046", "\u006C", "\0")),
    ("\uFB03", ("\u0046", "\u0066", "\u0069")),
    ("\uFB04", ("\u0046", "\u0066", "\u006C")),
    ("\uFB05", ("\u0053", "\u0074", "\0")),
    ("\uFB06", ("\u0053", "\u0074", "\0")),
    ("\uFB13", ("\u0544", "\u0576", "\0")),
    ("\uFB14", ("\u0544", "\u0565", "\0")),
    ("\uFB15", ("\u0544", "\u056B", "\0")),
    ("\uFB16", ("\u054E", "\u0576", "\0")),
    ("\uFB17", ("\u0544", "\u056D", "\0")),
    ("\uFF41", ("\uFF21", "\0", "\0")),
    ("\uFF42", ("\uFF22", "\0", "\0")),
    ("\uFF43", ("\uFF23", "\0", "\0")),
    ("\uFF44", ("\uFF24", "\0", "\0")),
    ("\uFF45", ("\uFF25", "\0", "\0")),
    ("\uFF46", ("\uFF26", "\0", "\0")),
    ("\uFF47", ("\uFF27", "\0", "\0")),
    ("\uFF48", ("\uFF28", "\0", "\0")),
    ("\uFF49", ("\uFF29", "\0", "\0")),
    ("\uFF4A", ("\uFF2A", "\0", "\0")),
    ("\uFF4B", ("\uFF2B", "\0", "\0")),
    ("\uFF4C", ("\uFF2C", "\0", "\0")),
    ("\uFF4D", ("\uFF2D", "\0", "\0")),
    ("\uFF4E", ("\uFF2E", "\0", "\0")),
    ("\uFF4F", ("\uFF2F", "\0", "\0")),
    ("\uFF50", ("\uFF30", "\0", "\0")),
    ("\uFF51", ("\uFF31", "\0", "\0")),
    ("\uFF52", ("\uFF32", "\0", "\0")),
    ("\uFF53", ("\uFF33", "\0", "\0")),
    ("\uFF54", ("\uFF34", "\0", "\0")),
    ("\uFF55", ("\uFF35", "\0", "\0")),
    ("\uFF56", ("\uFF36", "\0", "\0")),
    ("\uFF57", ("\uFF37", "\0", "\0")),
    ("\uFF58", ("\uFF38", "\0", "\0")),
    ("\uFF59", ("\uFF39", "\0", "\0")),
    ("\uFF5A", ("\uFF3A", "\0", "\0")),
    ("\U00010428", ("\U00010400", "\0", "\0")),
    ("\U00010429", ("\U00010401", "\0", "\0")),
    ("\U0001042A", ("\U00010402", "\0", "\0")),
    ("\U0001042B", ("\U00010403", "\0", "\0")),
    ("\U0001042C", ("\U00010404", "\0", "\0")),
    ("\U0001042D", ("\U00010405", "\0", "\0")),
    ("\U0001042E", ("\U00010406", "\0", "\0")),
    ("\U0001042F", ("\U00010407", "\0", "\0")),
    ("\U00010430", ("\U00010408", "\0", "\0")),
    ("\U00010431", ("\U00010409", "\0", "\0")),
    ("\U00010432", ("\U0001040A", "\0", "\0")),
    ("\U00010433", ("\U0001040B", "\0", "\0")),
    ("\U00010434", ("\U0001040C", "\0", "\0")),
    ("\U00010435", ("\U0001040D", "\0", "\0")),
    ("\U00010436", ("\U0001040E", "\0", "\0")),
    ("\U00010437", ("\U0001040F", "\0", "\0")),
    ("\U00010438", ("\U00010410", "\0", "\0")),
    ("\U00010439", ("\U00010411", "\0", "\0")),
    ("\U0001043A", ("\U00010412", "\0", "\0")),
    ("\U0001043B", ("\U00010413", "\0", "\0")),
    ("\U0001043C", ("\U00010414", "\0", "\0")),
    ("\U0001043D", ("\U00010415", "\0", "\0")),
    ("\U0001043E", ("\U00010416", "\0", "\0")),
    ("\U0001043F", ("\U00010417", "\0", "\0")),
    ("\U00010440", ("\U00010418", "\0", "\0")),
    ("\U00010441", ("\U00010419", "\0", "\0")),
    ("\U00010442", ("\U0001041A", "\0", "\0")),
    ("\U00010443", ("\U0001041B", "\0", "\0")),
    ("\U00010444", ("\U0001041C", "\0", "\0")),
    ("\U00010445", ("\U0001041D", "\0", "\0")),
    ("\U00010446", ("\U0001041E", "\0", "\0")),
    ("\U00010447", ("\U0001041F", "\0", "\0")),
    ("\U00010448", ("\U00010420", "\0", "\0")),
    ("\U00010449", ("\U00010421", "\0", "\0")),
    ("\U0001044A", ("\U00010422", "\0", "\0")),
    ("\U0001044B", ("\U00010423", "\0", "\0")),
    ("\U0001044C", ("\U00010424", "\0", "\0")),
    ("\U0001044D", ("\U00010425", "\0", "\0")),
    ("\U0001044E", ("\U00010426", "\0", "\0")),
    ("\U0001044F", ("\U00010427", "\0", "\0")),
    ("\U000104D8", ("\U000104B0", "\0", "\0")),
    ("\U000104D9", ("\U000104B1", "\0", "\0")),
    ("\U000104DA", ("\U000104B2", "\0", "\0")),
    ("\U000104DB", ("\U000104B3", "\0", "\0")),
    ("\U000104DC", ("\U000104B4", "\0", "\0")),
    ("\U000104DD", ("\U000104B5", "\0", "\0")),
    ("\U000104DE", ("\U000104B6", "\0", "\0")),
    ("\U000104DF", ("\U000104B7", "\0", "\0")),
    ("\U000104E0", ("\U000104B8", "\0", "\0")),
    ("\U000104E1", ("\U000104B9", "\0", "\0")),
    ("\U000104E2", ("\U000104BA", "\0", "\0")),
    ("\U000104E3", ("\U000104BB", "\0", "\0")),
    ("\U000104E4", ("\U000104BC", "\0", "\0")),
    ("\U000104E5", ("\U000104BD", "\0", "\0")),
    ("\U000104E6", ("\U000104BE", "\0", "\0")),
    ("\U000104E7", ("\U000104BF", "\0", "\0")),
    ("\U000104E8", ("\U000104C0", "\0", "\0")),
    ("\U000104E9", ("\U000104C1", "\0", "\0")),
    ("\U000104EA", ("\U000104C2", "\0", "\0")),
    ("\U000104EB", ("\U000104C3", "\0", "\0")),
    ("\U000104EC", ("\U000104C4", "\0", "\0")),
    ("\U000104ED", ("\U000104C5", "\0", "\0")),
    ("\U000104EE", ("\U000104C6", "\0", "\0")),
    ("\U000104EF", ("\U000104C7", "\0", "\0")),
    ("\U000104F0", ("\U000104C8", "\0", "\0")),
    ("\U000104F1", ("\U000104C9", "\0", "\0")),
    ("\U000104F2", ("\U000104CA", "\0", "\0")),
    ("\U000104F3", ("\U000104CB", "\0", "\0")),
    ("\U000104F4", ("\U000104CC", "\0", "\0")),
    ("\U000104F5", ("\U000104CD", "\0", "\0")),
    ("\U000104F6", ("\U000104CE", "\0", "\0")),
    ("\U000104F7", ("\U000104CF", "\0", "\0")),
    ("\U000104F8", ("\U000104D0", "\0", "\0")),
    ("\U000104F9", ("\U000104D1", "\0", "\0")),
    ("\U000104FA", ("\U000104D2", "\0", "\0")),
    ("\U000104FB", ("\U000104D3", "\0", "\0")),
    ("\U00010597", ("\U00010570", "\0", "\0")),
    ("\U00010598", ("\U00010571", "\0", "\0")),
    ("\U00010599", ("\U00010572", "\0", "\0")),
    ("\U0001059A", ("\U00010573", "\0", "\0")),
    ("\U0001059B", ("\U00010574", "\0", "\0")),
    ("\U0001059C", ("\U00010575", "\0", "\0")),
    ("\U0001059D", ("\U00010576", "\0", "\0")),
    ("\U0001059E", ("\U00010577", "\0", "\0")),
    ("\U0001059F", ("\U00010578", "\0", "\0")),
    ("\U000105A0", ("\U00010579", "\0", "\0")),
    ("\U000105A1", ("\U0001057A", "\0", "\0")),
    ("\U000105A3", ("\U0001057C", "\0", "\0")),
    ("\U000105A4", ("\U0001057D", "\0", "\0")),
    ("\U000105A5", ("\U0001057E", "\0", "\0")),
    ("\U000105A6", ("\U0001057F", "\0", "\0")),
    ("\U000105A7", ("\U00010580", "\0", "\0")),
    ("\U000105A8", ("\U00010581", "\0", "\0")),
    ("\U000105A9", ("\U00010582", "\0", "\0")),
    ("\U000105AA", ("\U00010583", "\0", "\0")),
    ("\U000105AB", ("\U00010584", "\0", "\0")),
    ("\U000105AC", ("\U00010585", "\0", "\0")),
    ("\U000105AD", ("\U00010586", "\0", "\0")),
    ("\U000105AE", ("\U00010587", "\0", "\0")),
    ("\U000105AF", ("\U00010588", "\0", "\0")),
    ("\U000105B0", ("\U00010589", "\0", "\0")),
    ("\U000105B1", ("\U0001058A", "\0", "\0")),
    ("\U000105B3", ("\U0001058C", "\0", "\0")),
    ("\U000105B4", ("\U0001058D", "\0", "\0")),
    ("\U000105B5", ("\U0001058E", "\0", "\0")),
    ("\U000105B6", ("\U0001058F", "\0", "\0")),
    ("\U000105B7", ("\U00010590", "\0", "\0")),
    ("\U000105B8", ("\U00010591", "\0", "\0")),
    ("\U000105B9", ("\U00010592", "\0", "\0")),
    ("\U000105BB", ("\U00010594", "\0", "\0")),
    ("\U000105BC", ("\U00010595", "\0", "\0")),
    ("\U00010CC0", ("\U00010C80", "\0", "\0")),
    ("\U00010CC1", ("\U00010C81", "\0", "\0")),
    ("\U00010CC2", ("\U00010C82", "\0", "\0")),
    ("\U00010CC3", ("\U00010C83", "\0", "\0")),
    ("\U00010CC4", ("\U00010C84", "\0", "\0")),
    ("\U00010CC5", ("\U00010C85", "\0", "\0")),
    ("\U00010CC6", ("\U00010C86", "\0", "\0")),
    ("\U00010CC7", ("\U00010C87", "\0", "\0")),
    ("\U00010CC8", ("\U00010C88", "\0", "\0")),
    ("\U00010CC9", ("\U00010C89", "\0", "\0")),
    ("\U00010CCA", ("\U00010C8A", "\0", "\0")),
    ("\U00010CCB", ("\U00010C8B", "\0", "\0")),
    ("\U00010CCC", ("\U00010C8C", "\0", "\0")),
    ("\U00010CCD", ("\U00010C8D", "\0", "\0")),
    ("\U00010CCE", ("\U00010C8E", "\0", "\0")),
    ("\U00010CCF", ("\U00010C8F", "\0", "\0")),
    ("\U00010CD0", ("\U00010C90", "\0", "\0")),
    ("\U00010CD1", ("\U00010C91", "\0", "\0")),
    ("\U00010CD2", ("\U00010C92", "\0", "\0")),
    ("\U00010CD3", ("\U00010C93", "\0", "\0")),
    ("\U00010CD4", ("\U00010C94", "\0", "\0")),
    ("\U00010CD5", ("\U00010C95", "\0", "\0")),
    ("\U00010CD6", ("\U00010C96", "\0", "\0")),
    ("\U00010CD7", ("\U00010C97", "\0", "\0")),
    ("\U00010CD8", ("\U00010C98", "\0", "\0")),
    ("\U00010CD9", ("\U00010C99", "\0", "\0")),
    ("\U00010CDA", ("\U00010C9A", "\0", "\0")),
    ("\U00010CDB", ("\U00010C9B", "\0", "\0")),
    ("\U00010CDC", ("\U00010C9C", "\0", "\0")),
    ("\U00010CDD", ("\U00010C9D", "\0", "\0")),
    ("\U00010CDE", ("\U00010C9E", "\0", "\0")),
    ("\U00010CDF", ("\U00010C9F", "\0", "\0")),
    ("\U00010CE0", ("\U00010CA0", "\0", "\0")),
    ("\U00010CE1", ("\U00010CA1", "\0", "\0")),
    ("\U00010CE2", ("\U00010CA2", "\0", "\0")),
    ("\U00010CE3", ("\U00010CA3", "\0", "\0")),
    ("\U00010CE4", ("\U00010CA4", "\0", "\0")),
    ("\U00010CE5", ("\U00010CA5", "\0", "\0")),
    ("\U00010CE6", ("\U00010CA6", "\0", "\0")),
    ("\U00010CE7", ("\U00010CA7", "\0", "\0")),
    ("\U00010CE8", ("\U00010CA8", "\0", "\0")),
    ("\U00010CE9", ("\U00010CA9", "\0", "\0")),
    ("\U00010CEA", ("\U00010CAA", "\0", "\0")),
    ("\U00010CEB", ("\U00010CAB", "\0", "\0")),
    ("\U00010CEC", ("\U00010CAC", "\0", "\0")),
    ("\U00010CED", ("\U00010CAD", "\0", "\0")),
    ("\U00010CEE", ("\U00010CAE", "\0", "\0")),
    ("\U00010CEF", ("\U00010CAF", "\0", "\0")),
    ("\U00010CF0", ("\U00010CB0", "\0", "\0")),
    ("\U00010CF1", ("\U00010CB1", "\0", "\0")),
    ("\U00010CF2", ("\U00010CB2", "\0", "\0")),
    ("\U000118C0", ("\U000118A0", "\0", "\0")),
    ("\U000118C1", ("\U000118A1", "\0", "\0")),
    ("\U000118C2", ("\U000118A2", "\0", "\0")),
    ("\U000118C3", ("\U000118A3", "\0", "\0")),
    ("\U000118C4", ("\U000118A4", "\0", "\0")),
    ("\U000118C5", ("\U000118A5", "\0", "\0")),
    ("\U000118C6", ("\U000118A6", "\0", "\0")),
    ("\U000118C7", ("\U000118A7", "\0", "\0")),
    ("\U000118C8", ("\U000118A8", "\0", "\0")),
    ("\U000118C9", ("\U000118A9", "\0", "\0")),
    ("\U000118CA", ("\U000118AA", "\0", "\0")),
    ("\U000118CB", ("\U000118AB", "\0", "\0")),
    ("\U000118CC", ("\U000118AC", "\0", "\0")),
    ("\U000118CD", ("\U000118AD", "\0", "\0")),
    ("\U000118CE", ("\U000118AE", "\0", "\0")),
    ("\U000118CF", ("\U000118AF", "\0", "\0")),
    ("\U000118D0", ("\U000118B0", "\0", "\0")),
    ("\U000118D1", ("\U000118B1", "\0", "\0")),
    ("\U000118D2", ("\U000118B2", "\0", "\0")),
    ("\U000118D3", ("\U000118B3", "\0", "\0")),
    ("\U000118D4", ("\U000118B4", "\0", "\0")),
    ("\U000118D5", ("\U000118B5", "\0", "\0")),
    ("\U000118D6", ("\U000118B6", "\0", "\0")),
    ("\U000118D7", ("\U000118B7", "\0", "\0")),
    ("\U000118D8", ("\U000118B8", "\0", "\0")),
    ("\U000118D9", ("\U000118B9", "\0", "\0")),
    ("\U000118DA", ("\U000118BA", "\0", "\0")),
    ("\U000118DB", ("\U000118BB", "\0", "\0")),
    ("\U000118DC", ("\U000118BC", "\0", "\0")),
    ("\U000118DD", ("\U000118BD", "\0", "\0")),
    ("\U000118DE", ("\U000118BE", "\0", "\0")),
    ("\U000118DF", ("\U000118BF", "\0", "\0")),
    ("\U00016E60", ("\U00016E40", "\0", "\0")),
    ("\U00016E61", ("\U00016E41", "\0", "\0")),
    ("\U00016E62", ("\U00016E42", "\0", "\0")),
    ("\U00016E63", ("\U00016E43", "\0", "\0")),
    ("\U00016E64", ("\U00016E44", "\0", "\0")),
    ("\U00016E65", ("\U00016E45", "\0", "\0")),
    ("\U00016E66", ("\U00016E46", "\0", "\0")),
    ("\U00016E67", ("\U00016E47", "\0", "\0")),
    ("\U00016E68", ("\U00016E48", "\0", "\0")),
    ("\U00016E69", ("\U00016E49", "\0", "\0")),
    ("\U00016E6A", ("\U00016E4A", "\0", "\0")),
    ("\U00016E6B", ("\U00016E4B", "\0", "\0")),
    ("\U00016E6C", ("\U00016E4C", "\0", "\0")),
    ("\U00016E6D", ("\U00016E4D", "\0", "\0")),
    ("\U00016E6E", ("\U00016E4E", "\0", "\0")),
    ("\U00016E6F", ("\U00016E4F", "\0", "\0")),
    ("\U00016E70", ("\U00016E50", "\0", "\0")),
    ("\U00016E71", ("\U00016E51", "\0", "\0")),
    ("\U00016E72", ("\U00016E52", "\0", "\0")),
    ("\U00016E73", ("\U00016E53", "\0", "\0")),
    ("\U00016E74", ("\U00016E54", "\0", "\0")),
    ("\U00016E75", ("\U00016E55", "\0", "\0")),
    ("\U00016E76", ("\U00016E56", "\0", "\0")),
    ("\U00016E77", ("\U00016E57", "\0", "\0")),
    ("\U00016E78", ("\U00016E58", "\0", "\0")),
    ("\U00016E79", ("\U00016E59", "\0", "\0")),
    ("\U00016E7A", ("\U00016E5A", "\0", "\0")),
    ("\U00016E7B", ("\U00016E5B", "\0", "\0")),
    ("\U00016E7C", ("\U00016E5C", "\0", "\0")),
    ("\U00016E7D", ("\U00016E5D", "\0", "\0")),
    ("\U00016E7E", ("\U00016E5E", "\0", "\0")),
    ("\U00016E7F", ("\U00016E5F", "\0", "\0")),
    ("\U0001E922", ("\U0001E900", "\0", "\0")),
    ("\U0001E923", ("\U0001E901", "\0", "\0")),
    ("\U0001E924", ("\U0001E902", "\0", "\0")),
    ("\U0001E925", ("\U0001E903", "\0", "\0")),
    ("\U0001E926", ("\U0001E904", "\0", "\0")),
    ("\U0001E927", ("\U0001E905", "\0", "\0")),
    ("\U0001E928", ("\U0001E906", "\0", "\0")),
    ("\U0001E929", ("\U0001E907", "\0", "\0")),
    ("\U0001E92A", ("\U0001E908", "\0", "\0")),
    ("\U0001E92B", ("\U0001E909", "\0", "\0")),
    ("\U0001E92C", ("\U0001E90A", "\0", "\0")),
    ("\U0001E92D", ("\U0001E90B", "\0", "\0")),
    ("\U0001E92E", ("\U0001E90C", "\0", "\0")),
    ("\U0001E92F", ("\U0001E90D", "\0", "\0")),
    ("\U0001E930", ("\U0001E90E", "\0", "\0")),
    ("\U0001E931", ("\U0001E90F", "\0", "\0")),
    ("\U0001E932", ("\U0001E910", "\0", "\0")),
    ("\U0001E933", ("\U0001E911", "\0", "\0")),
    ("\U0001E934", ("\U0001E912", "\0", "\0")),
    ("\U0001E935", ("\U0001E913", "\0", "\0")),
    ("\U0001E936", ("\U0001E914", "\0", "\0")),
    ("\U0001E937", ("\U0001E915", "\0", "\0")),
    ("\U0001E938", ("\U0001E916", "\0", "\0")),
    ("\U0001E939", ("\U0001E917", "\0", "\0")),
    ("\U0001E93A", ("\U0001E918", "\0", "\0")),
    ("\U0001E93B", ("\U0001E919", "\0", "\0")),
    ("\U0001E93C", ("\U0001E91A", "\0", "\0")),
    ("\U0001E93D", ("\U0001E91B", "\0", "\0")),
    ("\U0001E93E", ("\U0001E91C", "\0", "\0")),
    ("\U0001E93F", ("\U0001E91D", "\0", "\0")),
    ("\U0001E940", ("\U0001E91E", "\0", "\0")),
    ("\U0001E941", ("\U0001E91F", "\0", "\0")),
    ("\U0001E942", ("\U0001E920", "\0", "\0")),
    ("\U0001E943", ("\U0001E921", "\0", "\0")),
)
